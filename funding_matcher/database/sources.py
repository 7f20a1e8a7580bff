"""Read interfaces the matcher depends on."""

from typing import List, Optional, Protocol, Sequence

from ..models.business_profile import BusinessProfile
from ..models.program import Program
from ..models.stored_match import StoredMatch


class ProfileSource(Protocol):
    def get_business_profile(self, business_id: str) -> Optional[BusinessProfile]:
        """Return the current profile snapshot, or None if there is none."""
        ...


class ProgramCatalog(Protocol):
    def get_active_programs(self, program_ids: Optional[Sequence[str]] = None) -> List[Program]:
        """Return active programs, optionally restricted to program_ids."""
        ...


class MatchHistory(Protocol):
    def get_stored_matches(self, business_id: str, limit: int = 50) -> List[StoredMatch]:
        """Return match records written by the re-matching service, best first."""
        ...
