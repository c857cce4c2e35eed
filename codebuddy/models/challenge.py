# Data models for generated challenges and code evaluations
# codebuddy/models/challenge.py
import math
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from codebuddy.models.enums import Difficulty, Subject


class Challenge(BaseModel):
    """A coding exercise, either parsed from model output or taken from the fallback table."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    difficulty: Difficulty
    subject: Subject
    starter_code: str = Field(alias="starterCode", min_length=1)

    @field_validator("difficulty", "subject", mode="before")
    @classmethod
    def normalise_choice(cls, value):
        # Models tend to echo "Easy" or " CSS" back
        if isinstance(value, str):
            return value.strip().lower()
        return value


class Evaluation(BaseModel):
    model_config = ConfigDict(extra="allow")

    score: float
    feedback: str = Field(min_length=1)
    suggestions: List[str]
    solution: Optional[str] = None

    @field_validator("score", mode="before")
    @classmethod
    def reject_boolean_score(cls, value):
        if isinstance(value, bool):
            raise ValueError("score must be numeric")
        return value

    @field_validator("score")
    @classmethod
    def clamp_score(cls, value: float) -> float:
        if math.isnan(value):
            raise ValueError("score must be numeric")
        return min(max(value, 0.0), 100.0)

    @field_validator("suggestions", mode="before")
    @classmethod
    def suggestions_as_text(cls, value):
        # Only the list shape is required; items like {"point": "..."} are flattened to text
        if not isinstance(value, list):
            return value
        return [_suggestion_text(item) for item in value]


def _suggestion_text(item) -> str:
    if isinstance(item, str):
        return item
    if isinstance(item, dict):
        return " - ".join(str(part) for part in item.values())
    return str(item)
