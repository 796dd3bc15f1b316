"""Command-line front end for Talent Agent.

Usage:
    talent-agent jobs --query "Healthcare Manager" --location "United States"
    talent-agent tailor --job-index 0 --output resume.txt
    talent-agent tailor --job-file job.json --cover-letter
    talent-agent apply --job-index 0 --to hiring@example.com
"""
import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from config.settings import settings
from talent_agent.collectors.base import JobPosting
from talent_agent.collectors.remotive_collector import RemotiveCollector
from talent_agent.delivery.exceptions import DeliveryError
from talent_agent.delivery.resend_sender import ResendApplicationSender
from talent_agent.logging_config import setup_logging
from talent_agent.profile import DEFAULT_PROFILE, CandidateProfile, ProfileLoadError, load_profile
from talent_agent.tailoring.formatter import format_resume_text, resume_filename
from talent_agent.tailoring.tailor import tailor_resume

logger = logging.getLogger(__name__)


class JobSelectionError(Exception):
    """Raised when the requested posting cannot be resolved."""

    pass


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="talent-agent",
        description="Tailor a résumé to job postings and send applications.",
    )
    parser.add_argument("--log-level", default=None, help="Override LOG_LEVEL")
    sub = parser.add_subparsers(dest="command", required=True)

    jobs = sub.add_parser("jobs", help="List postings from the job board")
    _add_search_args(jobs)

    tailor = sub.add_parser("tailor", help="Tailor the profile to one posting")
    _add_selection_args(tailor)
    tailor.add_argument("--output", help="Write the plain-text résumé here ('-' for auto-named file)")
    tailor.add_argument("--cover-letter", action="store_true", help="Also print the cover letter")

    apply = sub.add_parser("apply", help="Tailor and email an application")
    _add_selection_args(apply)
    apply.add_argument("--to", required=True, help="Hiring contact email address")

    return parser


def _add_search_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--query", default=settings.default_search_query, help="Search term")
    parser.add_argument("--location", default=settings.default_search_location, help="Location filter")
    parser.add_argument("--limit", type=int, default=settings.default_search_limit, help="Max postings")


def _add_selection_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--profile", help="Profile YAML (default: config/profile.yaml)")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--job-file", help="JSON file holding one posting")
    group.add_argument("--job-index", type=int, help="Index into the live search results")
    _add_search_args(parser)


async def search_jobs(query: str, location: str, limit: int) -> list[JobPosting]:
    collector = RemotiveCollector(limit=limit, category=settings.remotive_category)
    return await collector.search(query, location)


def resolve_profile(path: Optional[str]) -> CandidateProfile:
    """Profile from ``path``, else config/profile.yaml, else the built-in default."""
    if path:
        return load_profile(path)
    if settings.profile_path.is_file():
        return load_profile(settings.profile_path)
    logger.debug("No profile at %s, using built-in default", settings.profile_path)
    return DEFAULT_PROFILE


def resolve_job(args: argparse.Namespace) -> JobPosting:
    """Load the posting named by ``--job-file`` or ``--job-index``."""
    if args.job_file:
        try:
            data = json.loads(Path(args.job_file).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise JobSelectionError(f"Could not read job file {args.job_file}: {e}") from e
        if not isinstance(data, dict):
            raise JobSelectionError(f"Job file {args.job_file} must hold a JSON object")
        return JobPosting.from_dict(data)

    jobs = asyncio.run(search_jobs(args.query, args.location, args.limit))
    if not 0 <= args.job_index < len(jobs):
        raise JobSelectionError(
            f"No posting at index {args.job_index} ({len(jobs)} found for '{args.query}')"
        )
    return jobs[args.job_index]


def cmd_jobs(args: argparse.Namespace) -> int:
    jobs = asyncio.run(search_jobs(args.query, args.location, args.limit))
    if not jobs:
        logger.info("No postings found for '%s'", args.query)
        return 0
    for i, job in enumerate(jobs):
        print(f"[{i}] {job.title} | {job.company} | {job.location}")
    return 0


def cmd_tailor(args: argparse.Namespace) -> int:
    profile = resolve_profile(args.profile)
    job = resolve_job(args)
    resume = tailor_resume(profile, job)
    text = format_resume_text(resume)

    if args.output:
        path = Path(resume_filename(resume) if args.output == "-" else args.output)
        path.write_text(text, encoding="utf-8")
        logger.info("Wrote tailored résumé to %s", path)
    else:
        print(text, end="")

    if args.cover_letter:
        print()
        print(resume.cover_letter)
    return 0


def cmd_apply(args: argparse.Namespace) -> int:
    profile = resolve_profile(args.profile)
    job = resolve_job(args)
    resume = tailor_resume(profile, job)
    sender = ResendApplicationSender.from_settings()
    message_id = asyncio.run(sender.send(resume, args.to, format_resume_text(resume)))
    logger.info("Application sent (id %s)", message_id)
    return 0


COMMANDS = {
    "jobs": cmd_jobs,
    "tailor": cmd_tailor,
    "apply": cmd_apply,
}


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(level=args.log_level or settings.log_level, log_file=settings.log_file)

    try:
        return COMMANDS[args.command](args)
    except (ProfileLoadError, JobSelectionError, DeliveryError, OSError) as e:
        logger.error("Error: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
