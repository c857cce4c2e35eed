# streamlit_app/scoreboard.py
from typing import Dict

from codebuddy.models.challenge import Challenge, Evaluation
from codebuddy.utils.config import settings

def score_band(score: float) -> str:
    """Colour band used when rendering an evaluation score."""
    if score >= 80:
        return "good"
    if score >= 60:
        return "fair"
    return "poor"

class Scoreboard:
    """
    Points and completed-challenge counters for one browser session. Each
    challenge contributes its best score once, however often it is evaluated.
    """

    def __init__(self, passing_score: int | None = None):
        self.passing_score = passing_score if passing_score is not None else settings.passing_score
        self.best_scores: Dict[Challenge, float] = {}

    def record(self, challenge: Challenge, evaluation: Evaluation) -> None:
        previous = self.best_scores.get(challenge, 0.0)
        self.best_scores[challenge] = max(previous, evaluation.score)

    @property
    def points(self) -> int:
        return sum(round(score) for score in self.best_scores.values())

    @property
    def completed(self) -> int:
        return sum(1 for score in self.best_scores.values() if score >= self.passing_score)
