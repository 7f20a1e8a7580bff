"""The six qualification rules, in evaluation order.

Each rule looks only at its own inputs and returns a RuleOutcome; rules
never read each other's results. A rule whose profile field (or
the program text it reads, for business type, funding amount and BEE) is
absent returns a skipped outcome. Misses on those three rules are recorded
in the breakdown only, without a reason.
"""

from dataclasses import dataclass
from typing import Callable, Tuple

from ..models.business_profile import BusinessProfile
from ..models.program import Program
from ..models.qualification_result import RuleOutcome
from .keywords import (
    BEE_MARKERS,
    BUSINESS_TYPE_KEYWORDS,
    FUNDING_AMOUNT_KEYWORDS,
    FUNDING_TYPE_KEYWORDS,
    OPEN_ELIGIBILITY_MARKERS,
    find_keyword,
    first_token,
    keywords_for,
    split_sectors,
)
from .points import RULE_POINTS

MATCH = "✓"
MISS = "✗"
PARTIAL = "?"


@dataclass(frozen=True)
class Rule:
    """A named rule and its evaluation function."""

    name: str
    evaluate: Callable[[BusinessProfile, Program], RuleOutcome]


def check_sector(profile: BusinessProfile, program: Program) -> RuleOutcome:
    """Profile sectors against the program's comma-separated sector list."""

    criterion = "Sector Matching"
    if not profile.sectors:
        return RuleOutcome.skip(criterion, RULE_POINTS.sector)

    tokens = split_sectors(program.sectors)
    if not tokens:
        return RuleOutcome(
            criterion=criterion,
            points=RULE_POINTS.sector_unspecified,
            max_points=RULE_POINTS.sector,
            matched=True,
            partial=True,
            reason=f"{PARTIAL} Program sectors not specified",
        )

    matched = [
        sector for sector in profile.sectors
        if any(token in sector.lower() or sector.lower() in token for token in tokens)
    ]
    if matched:
        return RuleOutcome(
            criterion=criterion,
            points=RULE_POINTS.sector,
            max_points=RULE_POINTS.sector,
            matched=True,
            reason=f"{MATCH} Matches your sectors: {', '.join(matched)}",
        )

    return RuleOutcome(
        criterion=criterion,
        max_points=RULE_POINTS.sector,
        reason=f"{MISS} No sector match (you: {', '.join(profile.sectors)})",
    )


def check_funding_type(profile: BusinessProfile, program: Program) -> RuleOutcome:
    """First desired funding type whose keywords appear in summary or eligibility."""

    criterion = "Funding Type Matching"
    if not profile.funding_types:
        return RuleOutcome.skip(criterion, RULE_POINTS.funding_type)

    program_text = f"{program.summary.lower()} {program.eligibility.lower()}"
    for funding_type in profile.funding_types:
        if find_keyword(program_text, keywords_for(FUNDING_TYPE_KEYWORDS, funding_type)):
            return RuleOutcome(
                criterion=criterion,
                points=RULE_POINTS.funding_type,
                max_points=RULE_POINTS.funding_type,
                matched=True,
                reason=f"{MATCH} Matches funding type: {funding_type}",
            )

    return RuleOutcome(
        criterion=criterion,
        max_points=RULE_POINTS.funding_type,
        reason=f"{MISS} No funding type match (you want: {', '.join(profile.funding_types)})",
    )


def check_business_type(profile: BusinessProfile, program: Program) -> RuleOutcome:
    """Business structure keywords in eligibility, or open eligibility wording."""

    criterion = "Business Type Matching"
    if not profile.business_type or not program.eligibility:
        return RuleOutcome.skip(criterion, RULE_POINTS.business_type)

    eligibility = program.eligibility.lower()
    if find_keyword(eligibility, keywords_for(BUSINESS_TYPE_KEYWORDS, profile.business_type)):
        return RuleOutcome(
            criterion=criterion,
            points=RULE_POINTS.business_type,
            max_points=RULE_POINTS.business_type,
            matched=True,
            reason=f"{MATCH} Matches business type: {profile.business_type}",
        )

    if find_keyword(eligibility, OPEN_ELIGIBILITY_MARKERS):
        return RuleOutcome(
            criterion=criterion,
            points=RULE_POINTS.business_type_open,
            max_points=RULE_POINTS.business_type,
            matched=True,
            partial=True,
            reason=f"{PARTIAL} Business type not specified in eligibility",
        )

    return RuleOutcome(criterion=criterion, max_points=RULE_POINTS.business_type)


def check_industry(profile: BusinessProfile, program: Program) -> RuleOutcome:
    """Industry in eligibility, or eligibility's first word in the industry."""

    criterion = "Industry Matching"
    if not profile.industry:
        return RuleOutcome.skip(criterion, RULE_POINTS.industry)

    industry = profile.industry.lower()
    eligibility = program.eligibility.lower()
    # Empty eligibility has no leading word to fall back on
    if industry in eligibility or (eligibility and first_token(eligibility) in industry):
        return RuleOutcome(
            criterion=criterion,
            points=RULE_POINTS.industry,
            max_points=RULE_POINTS.industry,
            matched=True,
            reason=f"{MATCH} Matches your industry: {profile.industry}",
        )

    return RuleOutcome(
        criterion=criterion,
        max_points=RULE_POINTS.industry,
        reason=f"{MISS} No industry match (you: {profile.industry})",
    )


def check_funding_amount(profile: BusinessProfile, program: Program) -> RuleOutcome:
    """Amount band keywords in the program's funding amount description."""

    criterion = "Funding Amount Matching"
    band = profile.funding_amount_needed
    if not band or not program.funding_amount:
        return RuleOutcome.skip(criterion, RULE_POINTS.funding_amount)

    if find_keyword(program.funding_amount.lower(), keywords_for(FUNDING_AMOUNT_KEYWORDS, band)):
        return RuleOutcome(
            criterion=criterion,
            points=RULE_POINTS.funding_amount,
            max_points=RULE_POINTS.funding_amount,
            matched=True,
            reason=f"{MATCH} Funding amount matches your needs",
        )

    return RuleOutcome(criterion=criterion, max_points=RULE_POINTS.funding_amount)


def check_bee(profile: BusinessProfile, program: Program) -> RuleOutcome:
    """BEE credit when the program mentions BEE and the business is certified."""

    criterion = "BEE Level Matching"
    if not profile.bee_level or not find_keyword(program.eligibility.lower(), BEE_MARKERS):
        return RuleOutcome.skip(criterion, RULE_POINTS.bee)

    if profile.is_bee_certified:
        return RuleOutcome(
            criterion=criterion,
            points=RULE_POINTS.bee,
            max_points=RULE_POINTS.bee,
            matched=True,
            reason=f"{MATCH} BEE level may be relevant",
        )

    return RuleOutcome(criterion=criterion, max_points=RULE_POINTS.bee)


RULES: Tuple[Rule, ...] = (
    Rule("sector", check_sector),
    Rule("funding_type", check_funding_type),
    Rule("business_type", check_business_type),
    Rule("industry", check_industry),
    Rule("funding_amount", check_funding_amount),
    Rule("bee", check_bee),
)
