"""Points awarded by each qualification rule.

The table is fixed. Full points sum to 100 so a score can never leave
the 0-100 range.
"""

from pydantic import BaseModel, ConfigDict, field_validator

from ..models.qualification_result import MAX_SCORE

FULL_POINT_FIELDS = (
    "sector",
    "funding_type",
    "business_type",
    "industry",
    "funding_amount",
    "bee",
)


class RulePoints(BaseModel):
    """Points per rule, plus the two partial-credit values."""

    model_config = ConfigDict(frozen=True)

    sector: int = 30
    funding_type: int = 25
    business_type: int = 15
    industry: int = 15
    funding_amount: int = 10
    bee: int = 5
    sector_unspecified: int = 15
    business_type_open: int = 10

    @field_validator(
        "sector", "funding_type", "business_type", "industry", "funding_amount", "bee",
        "sector_unspecified", "business_type_open",
    )
    @classmethod
    def non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Points must be non-negative, got {v}")
        return v

    def model_post_init(self, __context) -> None:
        """Validate totals and partial credit."""
        total = sum(getattr(self, name) for name in FULL_POINT_FIELDS)
        if total != MAX_SCORE:
            raise ValueError(f"Rule points must sum to {MAX_SCORE}, got {total}")
        if self.sector_unspecified > self.sector:
            raise ValueError(
                f"sector_unspecified ({self.sector_unspecified}) exceeds sector ({self.sector})"
            )
        if self.business_type_open > self.business_type:
            raise ValueError(
                f"business_type_open ({self.business_type_open}) exceeds "
                f"business_type ({self.business_type})"
            )


RULE_POINTS = RulePoints()
