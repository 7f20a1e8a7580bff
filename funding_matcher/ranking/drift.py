"""Compare computed scores with match records stored by the re-matching service."""

import logging
from dataclasses import dataclass
from typing import Iterable, List

from ..models.qualification_result import RankedProgram
from ..models.stored_match import StoredMatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScoreDrift:
    program_id: str
    computed_score: int
    stored_score: int

    @property
    def delta(self) -> int:
        return self.stored_score - self.computed_score


def find_score_drift(
    ranked: Iterable[RankedProgram],
    stored_matches: Iterable[StoredMatch],
    tolerance: int = 0,
) -> List[ScoreDrift]:
    """List programs whose stored score differs from the computed one.

    Args:
        ranked: Programs scored by this matcher
        stored_matches: Records from the match history
        tolerance: Largest absolute difference still considered consistent

    Returns:
        One ScoreDrift per drifting program, in ranked order. Programs
        missing from either side are ignored.
    """
    stored_by_program = {}
    for match in stored_matches:
        # Histories may repeat a program; keep the first row seen
        stored_by_program.setdefault(match.program_id, match)

    drift = []
    for program in ranked:
        if program.id is None or program.id not in stored_by_program:
            continue
        stored = stored_by_program[program.id]
        if abs(stored.match_score - program.match_score) > tolerance:
            drift.append(ScoreDrift(program.id, program.match_score, stored.match_score))

    if drift:
        logger.warning("Score drift on %d programs (tolerance=%d)", len(drift), tolerance)
    return drift
