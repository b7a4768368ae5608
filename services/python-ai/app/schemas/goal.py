from typing import Any, Dict, Literal, Optional, Tuple

from pydantic import BaseModel, StrictStr, field_validator

GoalCategory = Literal["health", "money_career", "family_life_balance", "learning", "other"]

GOAL_CATEGORIES: Tuple[str, ...] = ("health", "money_career", "family_life_balance", "learning", "other")
FALLBACK_CATEGORY: GoalCategory = "other"

AnalysisResult = Dict[str, Any]


class GoalInput(BaseModel):
    title: StrictStr
    description: Optional[StrictStr] = None

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Title is required")
        return value

    @field_validator("description")
    @classmethod
    def empty_description_is_absent(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and not value.strip():
            return None
        return value


class CategoryResult(BaseModel):
    category: GoalCategory = FALLBACK_CATEGORY
