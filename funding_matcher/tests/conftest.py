"""Pytest configuration and fixtures."""

import pytest

from funding_matcher.models import BusinessProfile, Program


@pytest.fixture
def retail_profile():
    """Retail business wanting loans, with every field set."""
    return BusinessProfile(
        business_id="biz-001",
        sectors=["Retail"],
        funding_types=["Loans", "Grants"],
        business_type="pty-ltd",
        industry="Retail",
        funding_amount_needed="100k-500k",
        bee_level="level-2",
    )


@pytest.fixture
def loan_program():
    """Program matching retail_profile on every rule."""
    return Program(
        id="prog-loan",
        name="Retail Loan Scheme",
        sectors="Retail, Wholesale",
        summary="Business loan scheme for small retailers",
        eligibility="Retail businesses registered as a Pty Ltd company with BEE certification",
        funding_amount="R100k to R500k",
    )


@pytest.fixture
def mining_program():
    """Program matching retail_profile on nothing."""
    return Program(
        id="prog-mining",
        name="Mining Equity Fund",
        sectors="Mining, Minerals",
        summary="Equity stake in exploration ventures",
        eligibility="Exploration firms with prospecting rights",
        funding_amount="R20 million",
    )


@pytest.fixture
def catalog(loan_program, mining_program):
    """Small mixed catalog in a fixed order."""
    return [
        mining_program,
        Program(
            id="prog-open",
            name="Open Enterprise Fund",
            sectors="",
            summary="Grant funding for growing enterprises",
            eligibility="All registered enterprises are eligible",
            funding_amount="up to R1 million",
        ),
        loan_program,
        Program(
            id="prog-wholesale",
            name="Wholesale Credit Line",
            sectors="Wholesale",
            summary="Credit facility",
            eligibility="Distributors",
            funding_amount="",
        ),
    ]
