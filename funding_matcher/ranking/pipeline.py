"""Ranking pipeline: score a candidate set and rank or filter it."""

import logging
from typing import Iterable, List, Optional

from ..models.business_profile import BusinessProfile
from ..models.program import Program
from ..models.qualification_result import QualificationResult, RankedProgram
from ..scorer import score_program

logger = logging.getLogger(__name__)


def score_all(
    programs: Optional[Iterable[Program]],
    profile: Optional[BusinessProfile],
) -> List[RankedProgram]:
    """Score every program, keeping input order.

    Without a profile every program is annotated with a zero,
    non-qualifying result.
    """
    programs = list(programs or [])

    if profile is None:
        missing = QualificationResult.missing_input()
        return [RankedProgram.from_program(p, missing) for p in programs]

    ranked = [
        RankedProgram.from_program(p, score_program(p, profile))
        for p in programs
    ]
    logger.info(
        "Scored %d programs for business %s: %d qualify",
        len(ranked),
        profile.business_id,
        sum(1 for r in ranked if r.qualification.qualifies),
    )
    return ranked


def filter_qualified(
    programs: Optional[Iterable[Program]],
    profile: Optional[BusinessProfile],
) -> List[RankedProgram]:
    """Return qualifying programs, best match first.

    Ties keep their input order (sorted() is stable, also with reverse=True).
    """
    programs = list(programs or [])
    if profile is None or not programs:
        return []

    qualified = [r for r in score_all(programs, profile) if r.qualification.qualifies]
    return sorted(qualified, key=lambda r: r.match_score, reverse=True)
