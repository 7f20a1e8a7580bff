"""BusinessProfile - Declared attributes of a business seeking funding."""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class FundingType(str, Enum):
    """Funding types a business can ask for."""

    GRANTS = "Grants"
    LOANS = "Loans"
    EQUITY_INVESTMENT = "Equity Investment"
    VOUCHERS = "Vouchers"
    SUBSIDIES = "Subsidies"
    MENTORSHIP_PROGRAMS = "Mentorship Programs"


class BusinessType(str, Enum):
    """Registered business structure."""

    SOLE_PROPRIETOR = "sole-proprietor"
    PARTNERSHIP = "partnership"
    PTY_LTD = "pty-ltd"
    CC = "cc"
    NPC = "npc"
    COOPERATIVE = "cooperative"


class FundingAmountBand(str, Enum):
    """Funding amount needed, as a band."""

    UNDER_100K = "under-100k"
    FROM_100K_TO_500K = "100k-500k"
    FROM_500K_TO_1M = "500k-1m"
    FROM_1M_TO_5M = "1m-5m"
    FROM_5M_TO_10M = "5m-10m"
    FROM_10M_TO_50M = "10m-50m"
    OVER_50M = "over-50m"


NOT_CERTIFIED = "not-certified"


def _as_list(value: Any) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        return value.split(",")
    return list(value)


class BusinessProfile(BaseModel):
    """Read-only snapshot of a business profile used for one scoring pass.

    Every field is optional; a rule whose profile field is absent is skipped.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )

    business_id: Optional[str] = Field(None, description="Identifier in the profile source")
    sectors: list[str] = Field(default_factory=list, description="Industry sectors, case-insensitive")
    funding_types: list[str] = Field(default_factory=list, description="Desired funding types, in preference order")
    business_type: Optional[BusinessType] = Field(None, description="Registered business structure")
    industry: Optional[str] = Field(None, description="Free-text industry")
    funding_amount_needed: Optional[FundingAmountBand] = Field(None, description="Funding amount band")
    bee_level: Optional[str] = Field(None, description="BEE level; 'not-certified' excludes BEE credit")

    @field_validator("business_id", mode="before")
    @classmethod
    def id_to_str(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("sectors", mode="before")
    @classmethod
    def normalize_sectors(cls, v: Any) -> list[str]:
        """Trim, drop empties and case-insensitive duplicates, keep input order."""
        seen = set()
        sectors = []
        for item in _as_list(v):
            sector = str(item).strip()
            if sector and sector.lower() not in seen:
                seen.add(sector.lower())
                sectors.append(sector)
        return sectors

    @field_validator("funding_types", mode="before")
    @classmethod
    def normalize_funding_types(cls, v: Any) -> list[str]:
        funding_types = []
        for item in _as_list(v):
            value = item.value if isinstance(item, Enum) else str(item).strip()
            if value and value not in funding_types:
                funding_types.append(value)
        return funding_types

    @field_validator("industry", "bee_level", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Optional[str]:
        if v is None:
            return None
        v = str(v).strip()
        return v or None

    @field_validator("business_type", "funding_amount_needed", mode="before")
    @classmethod
    def blank_enum_to_none(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def is_bee_certified(self) -> bool:
        return self.bee_level is not None and self.bee_level != NOT_CERTIFIED

    @classmethod
    def from_record(cls, row: dict) -> "BusinessProfile":
        """Build a profile from a database row.

        Unknown business types or amount bands are dropped with a warning
        rather than rejecting the whole profile.
        """
        data = dict(row)
        for key, enum_cls in (
            ("business_type", BusinessType),
            ("funding_amount_needed", FundingAmountBand),
        ):
            value = data.get(key)
            if value and value not in {member.value for member in enum_cls}:
                logger.warning(
                    "Ignoring unknown %s '%s' for business %s",
                    key, value, data.get("business_id"),
                )
                data[key] = None
        return cls.model_validate(data)
