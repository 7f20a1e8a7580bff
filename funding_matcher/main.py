"""Command-line entry point: rank funding programs for one business.

Usage:
    SUPABASE_URL=... SUPABASE_KEY=... python -m funding_matcher.main BUSINESS_ID
    python -m funding_matcher.main BUSINESS_ID --file catalog.yaml --all
"""

import argparse
import logging
import sys
from typing import List, Optional

from .config import load_config
from .database import FileSource, SupabaseClient
from .models import RankedProgram
from .ranking import filter_qualified, find_score_drift, score_all

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_NO_PROFILE = 1
EXIT_SOURCE_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="funding_matcher",
        description="Score funding programs against a business profile.",
    )
    parser.add_argument("business_id", help="Business to match")
    parser.add_argument("--all", action="store_true", help="Show every program, not only qualifying ones")
    parser.add_argument("--top", type=int, default=None, help="Show at most N programs")
    parser.add_argument("--file", default=None, help="Read profile and programs from a JSON/YAML file")
    parser.add_argument(
        "--compare-stored",
        action="store_true",
        help="Report drift against stored match records (Supabase only)",
    )
    return parser


def format_ranked(program: RankedProgram) -> str:
    """One block of text per program: header line plus its reasons."""
    verdict = "QUALIFIES" if program.qualification.qualifies else "does not qualify"
    lines = [
        f"{program.match_score:>3}/{program.qualification.max_score}  "
        f"{program.name or program.id or '(unnamed)'}  [{verdict}]"
    ]
    lines.extend(f"      {reason}" for reason in program.qualification.reasons)
    return "\n".join(lines)


def run(argv: Optional[List[str]] = None) -> int:
    """Run one scoring pass and print the result. Returns an exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.file:
            source = FileSource(args.file)
        else:
            config = load_config()
            logging.getLogger().setLevel(config.log_level)
            source = SupabaseClient(config.supabase_url, config.supabase_key)

        profile = source.get_business_profile(args.business_id)
        if profile is None:
            logger.error(f"No profile found for business {args.business_id}")
            return EXIT_NO_PROFILE

        programs = source.get_active_programs()
    except Exception as e:
        logger.error(f"Could not load profile or programs: {e}", exc_info=True)
        return EXIT_SOURCE_ERROR

    if args.all:
        ranked = score_all(programs, profile)
    else:
        ranked = filter_qualified(programs, profile)

    logger.info("=" * 60)
    logger.info(
        f"Business {args.business_id}: {len(ranked)} of {len(programs)} programs shown"
    )
    logger.info("=" * 60)

    shown = ranked[:args.top] if args.top is not None else ranked
    for program in shown:
        print(format_ranked(program))

    if args.compare_stored:
        if args.file:
            logger.warning("--compare-stored needs the Supabase source; skipping")
        else:
            try:
                stored = source.get_stored_matches(args.business_id, limit=config.match_history_limit)
            except Exception as e:
                logger.error(f"Could not load stored matches: {e}", exc_info=True)
                return EXIT_SOURCE_ERROR
            # Drift is checked against every scored program, not only the shown ones
            for drift in find_score_drift(score_all(programs, profile), stored):
                logger.warning(
                    f"Drift on program {drift.program_id}: computed={drift.computed_score} "
                    f"stored={drift.stored_score} delta={drift.delta:+d}"
                )

    return EXIT_OK


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
