from color_lines.exceptions import BaseColorLinesError


class InvalidPositionError(BaseColorLinesError):
    pass


class CellOccupiedError(BaseColorLinesError):
    pass


class EmptyCellError(BaseColorLinesError):
    pass


class CannotSpawnBallsError(BaseColorLinesError):
    pass
