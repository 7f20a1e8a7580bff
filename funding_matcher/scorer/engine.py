"""Rule-based qualification scorer for funding programs.

Folds the six fixed-point rules over one (profile, program) pair into an
immutable QualificationResult.
"""

import logging
from typing import Optional, Sequence

from ..models.business_profile import BusinessProfile
from ..models.program import Program
from ..models.qualification_result import QualificationResult
from .rules import RULES, Rule

logger = logging.getLogger(__name__)


def score_program(
    program: Optional[Program],
    profile: Optional[BusinessProfile],
    rules: Sequence[Rule] = RULES,
) -> QualificationResult:
    """Score a funding program against a business profile.

    Rules (points):
    1. Sector (30, 15 when the program lists no sectors)
    2. Funding type (25)
    3. Business type (15, 10 for open eligibility wording)
    4. Industry (15)
    5. Funding amount band (10)
    6. BEE relevance (5)

    Args:
        program: Program to score
        profile: Business profile snapshot
        rules: Rule table, evaluated in order

    Returns:
        QualificationResult; qualifies when score >= 40. Missing
        program or profile yields a zero score with a single reason.
    """

    if program is None or profile is None:
        return QualificationResult.missing_input()

    result = QualificationResult.from_outcomes(
        rule.evaluate(profile, program) for rule in rules
    )
    logger.debug(
        "Scored program %s: score=%d qualifies=%s",
        program.id or program.name, result.score, result.qualifies,
    )
    return result
