"""QualificationResult - Scorer output for one (profile, program) pair."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

from .program import Program

MAX_SCORE = 100
QUALIFICATION_THRESHOLD = 40
MISSING_INPUT_REASON = "Missing profile or program data"


class RuleOutcome(BaseModel):
    """Result of evaluating a single rule."""

    model_config = ConfigDict(frozen=True)

    criterion: str = Field(..., description="Rule name")
    points: int = Field(0, ge=0, description="Points awarded")
    max_points: int = Field(..., ge=0, description="Points available")
    matched: bool = Field(False, description="Full or partial credit awarded")
    partial: bool = Field(False, description="Partial credit only")
    skipped: bool = Field(False, description="Required profile field absent")
    reason: Optional[str] = Field(None, description="Human-readable reason, None when skipped")

    @classmethod
    def skip(cls, criterion: str, max_points: int) -> "RuleOutcome":
        return cls(criterion=criterion, max_points=max_points, skipped=True)


class QualificationResult(BaseModel):
    """Weighted match score and verdict.

    qualifies is always derived from score; it cannot be passed in
    inconsistently.
    """

    model_config = ConfigDict(frozen=True, alias_generator=to_camel, populate_by_name=True)

    score: int = Field(0, ge=0, le=MAX_SCORE)
    max_score: int = MAX_SCORE
    qualifies: bool = False
    reasons: tuple[str, ...] = ()
    breakdown: tuple[RuleOutcome, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def derive_qualifies(cls, data):
        if isinstance(data, dict):
            data = dict(data)
            data["qualifies"] = data.get("score", 0) >= QUALIFICATION_THRESHOLD
        return data

    @classmethod
    def from_outcomes(cls, outcomes) -> "QualificationResult":
        """Fold rule outcomes, in evaluation order, into a result."""
        outcomes = tuple(outcomes)
        return cls(
            score=sum(o.points for o in outcomes),
            reasons=tuple(o.reason for o in outcomes if o.reason),
            breakdown=outcomes,
        )

    @classmethod
    def missing_input(cls) -> "QualificationResult":
        return cls(score=0, reasons=(MISSING_INPUT_REASON,))


class RankedProgram(Program):
    """Program annotated with its qualification result."""

    qualification: QualificationResult
    match_score: int = Field(0, description="Same as qualification.score")

    @classmethod
    def from_program(cls, program: Program, qualification: QualificationResult) -> "RankedProgram":
        # A RankedProgram passed back in must not leak its old annotation
        return cls(
            **program.model_dump(include=set(Program.model_fields)),
            qualification=qualification,
            match_score=qualification.score,
        )
