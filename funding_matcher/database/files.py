"""File-backed profile source and program catalog.

Reads a JSON or YAML document of the form::

    profile:
      sectors: [Retail]
      fundingTypes: [Loans]
    programs:
      - id: p1
        sectors: Retail, Wholesale
        summary: business loan scheme
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Sequence

import yaml

from ..models.business_profile import BusinessProfile
from ..models.program import Program

logger = logging.getLogger(__name__)


class FileSource:
    """Profile and catalog loaded once from a local file."""

    def __init__(self, filepath: str) -> None:
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Catalog file not found: {filepath}")

        with open(path, 'r') as f:
            if path.suffix == '.json':
                data = json.load(f)
            elif path.suffix in ['.yaml', '.yml']:
                data = yaml.safe_load(f)
            else:
                raise ValueError(f"Unsupported file format: {path.suffix}. Use .json, .yaml, or .yml")

        data = data or {}
        profile = data.get("profile")
        self._profile = BusinessProfile.model_validate(profile) if profile is not None else None
        self._programs = [Program.model_validate(row) for row in data.get("programs") or []]
        logger.info("Loaded %d programs from %s", len(self._programs), path.name)

    def get_business_profile(self, business_id: str) -> Optional[BusinessProfile]:
        # A file holds exactly one profile; business_id only labels it
        if self._profile is None:
            return None
        if self._profile.business_id is None:
            return self._profile.model_copy(update={"business_id": business_id})
        return self._profile

    def get_active_programs(self, program_ids: Optional[Sequence[str]] = None) -> List[Program]:
        if not program_ids:
            return list(self._programs)
        wanted = set(program_ids)
        return [p for p in self._programs if p.id in wanted]
