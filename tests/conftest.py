from collections.abc import Iterator

import pytest

from color_lines.game_logic.interfaces.dependency_manager import DEPENDENCY_MANAGER


@pytest.fixture(autouse=True)
def reset_dependency_manager() -> Iterator[None]:
    # publishers and subscribers register themselves globally on creation; don't let them leak between tests
    DEPENDENCY_MANAGER.reset()
    yield
    DEPENDENCY_MANAGER.reset()
