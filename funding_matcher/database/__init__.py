"""Profile, program catalog and match history sources."""

from .client import SupabaseClient
from .files import FileSource
from .sources import MatchHistory, ProfileSource, ProgramCatalog

__all__ = ["SupabaseClient", "FileSource", "MatchHistory", "ProfileSource", "ProgramCatalog"]
