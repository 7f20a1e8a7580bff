"""Supabase read client for business profiles, programs and stored matches."""

import logging
import os
from typing import List, Optional, Sequence

import httpx
from supabase import Client, create_client
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    before_sleep_log,
)

from ..models.business_profile import BusinessProfile
from ..models.program import Program
from ..models.stored_match import StoredMatch

logger = logging.getLogger(__name__)

PROFILE_VIEW = "business_profile_view"
PROGRAMS_TABLE = "programs"
MATCH_HISTORY_TABLE = "program_matches_history"

PROGRAM_COLUMNS = "id, name, slug, source, summary, eligibility, funding_amount, sectors, created_at"


def db_retry():
    """Retry decorator for Supabase reads: 3 attempts, exponential backoff."""
    return retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=2, max=10),
        retry=retry_if_exception_type(httpx.HTTPError),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=True,
    )


class SupabaseClient:
    """Read-only client over the profile view, program catalog and match history."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
    ) -> None:
        """Initialize Supabase client from explicit args or env vars.

        Args:
            url: Supabase project URL (falls back to SUPABASE_URL env var).
            key: Supabase anon/service key (falls back to SUPABASE_KEY env var).
        """
        self._url = url or os.environ["SUPABASE_URL"]
        self._key = key or os.environ["SUPABASE_KEY"]
        self._client: Client = create_client(self._url, self._key)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @db_retry()
    def get_business_profile(self, business_id: str) -> Optional[BusinessProfile]:
        """Fetch the profile snapshot for a business.

        Args:
            business_id: Business identifier.

        Returns:
            BusinessProfile, or None if the business has no profile yet.
        """
        response = (
            self._client.table(PROFILE_VIEW)
            .select("*")
            .eq("business_id", business_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            logger.info("No profile found for business %s", business_id)
            return None
        return BusinessProfile.from_record(response.data[0])

    @db_retry()
    def get_active_programs(self, program_ids: Optional[Sequence[str]] = None) -> List[Program]:
        """Fetch active programs, newest first.

        Args:
            program_ids: Optional candidate subset; None means all active programs.

        Returns:
            List of Program objects.
        """
        query = (
            self._client.table(PROGRAMS_TABLE)
            .select(PROGRAM_COLUMNS)
            .eq("is_active", True)
        )
        if program_ids:
            query = query.in_("id", list(program_ids))
        response = query.order("created_at", desc=True).execute()

        programs = [Program(**row) for row in response.data or []]
        logger.info("Loaded %d active programs", len(programs))
        return programs

    @db_retry()
    def get_stored_matches(self, business_id: str, limit: int = 50) -> List[StoredMatch]:
        """Fetch match records written by the background matcher.

        Args:
            business_id: Business identifier.
            limit: Maximum number of rows.

        Returns:
            List of StoredMatch, highest score first.
        """
        response = (
            self._client.table(MATCH_HISTORY_TABLE)
            .select("*")
            .eq("business_id", business_id)
            .order("match_score", desc=True)
            .limit(limit)
            .execute()
        )
        return [StoredMatch(**row) for row in response.data or []]
