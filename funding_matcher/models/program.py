"""Program - Funding program record from the program catalog."""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class Program(BaseModel):
    """Funding program as read from the catalog.

    Free-text fields are never None: missing text is stored as "".
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "7b1f0c52",
                "name": "Small Business Loan Scheme",
                "slug": "small-business-loan-scheme",
                "source": "https://www.sefa.org.za/products",
                "sectors": "Retail, Wholesale, Manufacturing",
                "summary": "Business loan scheme for small enterprises",
                "eligibility": "All business types registered in South Africa",
                "fundingAmount": "R50,000 up to R5 million",
            }
        },
    )

    id: Optional[str] = Field(None, description="Catalog identifier")
    name: Optional[str] = Field(None, description="Program name")
    slug: Optional[str] = Field(None, description="URL slug")
    source: Optional[str] = Field(None, description="Source URL")

    sectors: str = Field("", description="Comma-separated sectors")
    summary: str = Field("", description="Program summary")
    eligibility: str = Field("", description="Eligibility text")
    funding_amount: str = Field("", description="Funding range description")

    @field_validator("id", mode="before")
    @classmethod
    def id_to_str(cls, v: Any) -> Optional[str]:
        return None if v is None else str(v)

    @field_validator("summary", "eligibility", "funding_amount", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("sectors", mode="before")
    @classmethod
    def coerce_sectors(cls, v: Any) -> str:
        # Anything that is not a comma-separated string counts as "not specified"
        if v is None:
            return ""
        if not isinstance(v, str):
            logger.debug("Ignoring malformed sectors value of type %s", type(v).__name__)
            return ""
        return v
