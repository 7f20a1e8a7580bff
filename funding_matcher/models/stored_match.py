"""StoredMatch - Match record written by the background re-matching service."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator


class StoredMatch(BaseModel):
    """Previously persisted match, possibly AI-assisted.

    Read-only here; the matcher only compares its own scores against these.
    """

    business_id: str = Field(..., description="Business the match belongs to")
    program_id: str = Field(..., description="Matched program")
    match_score: int = Field(0, description="Stored score")
    qualifies: Optional[bool] = Field(None, description="Stored verdict, if recorded")
    reasons: list[str] = Field(default_factory=list, description="Stored reasons")
    created_at: Optional[datetime] = Field(None, description="When the match was recorded")

    @field_validator("business_id", "program_id", mode="before")
    @classmethod
    def id_to_str(cls, v: Any) -> str:
        return str(v)

    @field_validator("match_score", mode="before")
    @classmethod
    def round_score(cls, v: Any) -> int:
        # AI-assisted rows may carry fractional scores
        return 0 if v is None else int(round(float(v)))

    @field_validator("reasons", mode="before")
    @classmethod
    def none_to_list(cls, v: Any) -> list:
        return v or []
