# models.py -- typed records produced and consumed by the analysis pipeline
from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class SafetyLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

    @property
    def label(self) -> str:
        return f"{self.value} Concern"

    @classmethod
    def from_score(cls, score: int) -> "SafetyLevel":
        if score <= 2:
            return cls.LOW
        if score <= 6:
            return cls.MODERATE
        return cls.HIGH


def clamp_score(score: int) -> int:
    return max(1, min(10, int(score)))


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class CuratedEntry(_CamelModel):
    """One row of the curated ingredient database."""

    base_score: int = Field(ge=1, le=10)
    category: str
    concerns: Tuple[str, ...] = ()
    benefits: Tuple[str, ...] = ()
    scientific_name: Optional[str] = None
    restrictions: Optional[Tuple[str, ...]] = None
    natural_alternatives: Optional[Tuple[str, ...]] = None
    research_links: Optional[Tuple[str, ...]] = None


class PartialRecord(_CamelModel):
    """
    What the remote lookup contributed for one ingredient.
    Every field is None when the source had nothing for it.
    """

    source: str
    function: Optional[str] = None
    ewg_score: Optional[int] = None
    reason_for_concern: Optional[str] = None
    common_use: Optional[str] = None


class IngredientRecord(_CamelModel):
    name: str
    function: str
    ewg_score: int = Field(ge=1, le=10)
    safety_level: SafetyLevel
    reason_for_concern: str
    common_use: str
    scientific_name: Optional[str] = None
    benefits: Optional[str] = None
    restrictions: Optional[str] = None
    natural_alternatives: Optional[str] = None
    research_links: Optional[str] = None

    @model_validator(mode="after")
    def level_matches_score(self):
        expected = SafetyLevel.from_score(self.ewg_score)
        if self.safety_level != expected:
            raise ValueError(
                f"safety level {self.safety_level.value} disagrees with score {self.ewg_score}"
            )
        return self

    def to_json(self) -> dict:
        payload = self.model_dump(mode="json", by_alias=True, exclude_none=True)
        payload["safetyLabel"] = self.safety_level.label
        return payload
