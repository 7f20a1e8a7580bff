"""Shared pydantic models for the funding matcher."""

from .business_profile import (
    BusinessProfile,
    BusinessType,
    FundingAmountBand,
    FundingType,
    NOT_CERTIFIED,
)
from .program import Program
from .qualification_result import (
    MAX_SCORE,
    QUALIFICATION_THRESHOLD,
    QualificationResult,
    RankedProgram,
    RuleOutcome,
)
from .stored_match import StoredMatch

__all__ = [
    "BusinessProfile",
    "BusinessType",
    "FundingAmountBand",
    "FundingType",
    "NOT_CERTIFIED",
    "Program",
    "MAX_SCORE",
    "QUALIFICATION_THRESHOLD",
    "QualificationResult",
    "RankedProgram",
    "RuleOutcome",
    "StoredMatch",
]
