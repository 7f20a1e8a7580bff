"""Tests for profile, program and result models."""

import logging

import pytest
from pydantic import ValidationError

from funding_matcher.models import (
    BusinessProfile,
    Program,
    QualificationResult,
    RankedProgram,
    StoredMatch,
)


class TestBusinessProfile:
    def test_accepts_camel_case_fields(self):
        profile = BusinessProfile.model_validate({
            "sectors": ["Retail"],
            "fundingTypes": ["Loans"],
            "businessType": "pty-ltd",
            "fundingAmountNeeded": "1m-5m",
            "beeLevel": "level-1",
        })

        assert profile.funding_types == ["Loans"]
        assert profile.business_type == "pty-ltd"
        assert profile.funding_amount_needed == "1m-5m"
        assert profile.bee_level == "level-1"

    def test_sectors_deduplicated_case_insensitively(self):
        profile = BusinessProfile(sectors=["Retail", " retail ", "", "Mining"])

        assert profile.sectors == ["Retail", "Mining"]

    def test_sectors_from_comma_separated_string(self):
        assert BusinessProfile(sectors="Retail, Mining").sectors == ["Retail", "Mining"]

    def test_funding_type_order_preserved(self):
        profile = BusinessProfile(funding_types=["Grants", "Loans", "Grants"])

        assert profile.funding_types == ["Grants", "Loans"]

    def test_invalid_business_type_rejected(self):
        with pytest.raises(ValidationError):
            BusinessProfile(business_type="llc")

    def test_blank_fields_become_absent(self):
        profile = BusinessProfile(industry="  ", bee_level="", business_type="")

        assert profile.industry is None
        assert profile.bee_level is None
        assert profile.business_type is None

    @pytest.mark.parametrize("bee_level,certified", [
        ("level-1", True),
        ("level-8", True),
        ("not-certified", False),
        (None, False),
    ])
    def test_bee_certification(self, bee_level, certified):
        assert BusinessProfile(bee_level=bee_level).is_bee_certified is certified

    def test_from_record_drops_unknown_enum_values(self, caplog):
        row = {
            "business_id": 42,
            "user_id": "u-1",
            "sectors": ["Retail"],
            "business_type": "llc",
            "funding_amount_needed": "100k-500k",
            "funding_types": None,
        }

        with caplog.at_level(logging.WARNING):
            profile = BusinessProfile.from_record(row)

        assert profile.business_id == "42"
        assert profile.business_type is None
        assert profile.funding_amount_needed == "100k-500k"
        assert profile.funding_types == []
        assert "llc" in caplog.text


class TestProgram:
    def test_missing_text_becomes_empty(self):
        program = Program(id=7, summary=None, eligibility=None, fundingAmount=None, sectors=None)

        assert program.id == "7"
        assert program.summary == ""
        assert program.eligibility == ""
        assert program.funding_amount == ""
        assert program.sectors == ""

    def test_database_row_with_extra_columns(self):
        program = Program(**{
            "id": "p1",
            "name": "Fund",
            "funding_amount": "R1m",
            "created_at": "2025-01-01T00:00:00Z",
            "is_active": True,
        })

        assert program.funding_amount == "R1m"


class TestQualificationResult:
    def test_result_is_immutable(self):
        result = QualificationResult(score=50)

        with pytest.raises(ValidationError):
            result.score = 10

    def test_missing_input(self):
        result = QualificationResult.missing_input()

        assert result.score == 0
        assert result.qualifies is False
        assert result.reasons == ("Missing profile or program data",)

    def test_score_above_max_rejected(self):
        with pytest.raises(ValidationError):
            QualificationResult(score=101)


def test_ranked_program_copies_program_fields(loan_program):
    result = QualificationResult(score=70, reasons=("✓ Matches funding type: Loans",))

    ranked = RankedProgram.from_program(loan_program, result)

    assert ranked.id == loan_program.id
    assert ranked.eligibility == loan_program.eligibility
    assert ranked.match_score == 70
    assert ranked.qualification is result
    assert isinstance(ranked, Program)


def test_stored_match_rounds_fractional_scores():
    match = StoredMatch(business_id=1, program_id=2, match_score=72.6, reasons=None)

    assert match.business_id == "1"
    assert match.program_id == "2"
    assert match.match_score == 73
    assert match.reasons == []
