"""Tests for job collectors."""
import asyncio
from unittest.mock import AsyncMock, patch

from talent_agent.collectors.base import BaseCollector, JobPosting
from talent_agent.collectors.remotive_collector import (
    RemotiveCollector,
    filter_by_location,
    normalize_remotive_job,
)
from talent_agent.collectors.utils import first_present


class TestJobPosting:
    """Tests for the JobPosting record."""

    def test_create_posting(self):
        job = JobPosting(id="1", title="Clinic Manager", company="Test Co")

        assert job.title == "Clinic Manager"
        assert job.tags == ()
        assert job.salary is None

    def test_tags_become_tuple(self):
        job = JobPosting(id="1", tags=["CMS", None, "EMR"])
        assert job.tags == ("CMS", "EMR")

    def test_none_text_becomes_empty(self):
        job = JobPosting(id="1", title=None, description=None)
        assert job.title == ""
        assert job.description == ""

    def test_from_dict_ignores_string_tags(self):
        assert JobPosting.from_dict({"id": "1", "tags": "CMS"}).tags == ()

    def test_from_dict_accepts_tag_list(self):
        assert JobPosting.from_dict({"id": "1", "tags": ["CMS", "EMR"]}).tags == ("CMS", "EMR")


class TestNormalizeRemotiveJob:
    """Tests for Remotive payload normalization."""

    def test_full_payload(self):
        job = normalize_remotive_job({
            "id": 1234,
            "url": "https://remotive.com/remote-jobs/1234",
            "title": "Practice Manager",
            "company_name": "CarePlus",
            "candidate_required_location": "USA",
            "description": "<p>Lead our clinics</p>",
            "tags": ["EMR", "billing"],
            "salary": "$90k - $110k",
            "publication_date": "2026-09-01T10:00:00",
        })

        assert job.id == "1234"
        assert job.title == "Practice Manager"
        assert job.company == "CarePlus"
        assert job.location == "USA"
        assert job.url == "https://remotive.com/remote-jobs/1234"
        assert job.description == "<p>Lead our clinics</p>"
        assert job.tags == ("EMR", "billing")
        assert job.salary == "$90k - $110k"
        assert job.published_at == "2026-09-01T10:00:00"

    def test_sparse_payload_uses_fallbacks(self):
        job = normalize_remotive_job({})

        assert job.id
        assert job.title == "Healthcare Manager"
        assert job.company == "Healthcare Organization"
        assert job.location == "United States"
        assert job.url == "#"
        assert job.description == ""
        assert job.tags == ()
        assert job.salary is None
        assert job.published_at is None

    def test_alternate_field_names(self):
        job = normalize_remotive_job({
            "url": "https://example.com/job",
            "company": "Alt Co",
            "job_type": "full_time",
            "job_description": "Body",
            "job_tags": ["HR"],
            "salary_is_estimated": "estimated",
            "created_at": "2026-01-01",
        })

        assert job.id == "https://example.com/job"
        assert job.company == "Alt Co"
        assert job.location == "full_time"
        assert job.description == "Body"
        assert job.tags == ("HR",)
        assert job.salary == "estimated"
        assert job.published_at == "2026-01-01"

    def test_non_list_tags_ignored(self):
        job = normalize_remotive_job({"tags": "EMR", "job_tags": None})
        assert job.tags == ()

    def test_first_present_skips_none(self):
        assert first_present({"a": None, "b": ""}, "a", "b", default="x") == ""
        assert first_present({}, "a", default="x") == "x"


class TestFilterByLocation:
    """Tests for location narrowing."""

    def _jobs(self):
        return [
            JobPosting(id="1", location="United States"),
            JobPosting(id="2", location="Europe"),
            JobPosting(id="3", location="USA, united states only"),
        ]

    def test_case_insensitive_contains(self):
        ids = [j.id for j in filter_by_location(self._jobs(), "united STATES")]
        assert ids == ["1", "3"]

    def test_falls_back_to_all(self):
        ids = [j.id for j in filter_by_location(self._jobs(), "Antarctica")]
        assert ids == ["1", "2", "3"]

    def test_blank_location(self):
        assert len(filter_by_location(self._jobs(), "")) == 3


class TestRemotiveCollector:
    """Tests for RemotiveCollector."""

    def test_collector_name(self):
        collector = RemotiveCollector()
        assert collector.name == "remotive"
        assert isinstance(collector, BaseCollector)

    def test_collect_parses_and_dedups(self):
        payload = {
            "job-count": 2,
            "jobs": [
                {"id": 1, "title": "Clinic Manager", "company_name": "A"},
                {"id": 2, "title": "Nurse Manager", "company_name": "B"},
                "not-a-record",
            ],
        }
        collector = RemotiveCollector(delay_between_requests=(0, 0))
        with patch(
            "talent_agent.collectors.remotive_collector.http_get_json",
            new=AsyncMock(return_value=payload),
        ) as mock_get:
            jobs = asyncio.run(collector.collect(["manager", "nurse"]))

        assert [j.id for j in jobs] == ["1", "2"]
        assert mock_get.await_count == 2
        params = mock_get.await_args.kwargs["params"]
        assert params["category"] == "medical-health"
        assert params["search"] == "nurse"

    def test_collect_handles_failed_request(self):
        collector = RemotiveCollector()
        with patch(
            "talent_agent.collectors.remotive_collector.http_get_json",
            new=AsyncMock(return_value=None),
        ):
            assert asyncio.run(collector.collect(["manager"])) == []

    def test_unexpected_format(self):
        collector = RemotiveCollector()
        with patch(
            "talent_agent.collectors.remotive_collector.http_get_json",
            new=AsyncMock(return_value={"jobs": "oops"}),
        ):
            assert asyncio.run(collector.collect(["manager"])) == []

    def test_search_filters_location(self):
        payload = {"jobs": [
            {"id": 1, "candidate_required_location": "Europe"},
            {"id": 2, "candidate_required_location": "United States"},
        ]}
        collector = RemotiveCollector(category=None)
        with patch(
            "talent_agent.collectors.remotive_collector.http_get_json",
            new=AsyncMock(return_value=payload),
        ) as mock_get:
            jobs = asyncio.run(collector.search("Healthcare Manager", "united states"))

        assert [j.id for j in jobs] == ["2"]
        assert "category" not in mock_get.await_args.kwargs["params"]
