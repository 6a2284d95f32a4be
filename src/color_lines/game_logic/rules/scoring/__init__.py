from color_lines.game_logic.rules.scoring.score_tracker import ScoreTracker

__all__ = ["ScoreTracker"]
