"""Pytest fixtures for Talent Agent tests."""
import sys
from pathlib import Path

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from talent_agent.collectors.base import JobPosting
from talent_agent.profile import DEFAULT_PROFILE, CandidateProfile


@pytest.fixture
def default_profile():
    """The built-in healthcare operations profile."""
    return DEFAULT_PROFILE


@pytest.fixture
def empty_profile():
    """A profile with every field blank."""
    return CandidateProfile()


@pytest.fixture
def healthcare_job():
    """Posting used in the CMS/EMR scenario."""
    return JobPosting(
        id="job-1",
        title="Healthcare Operations Manager",
        company="Mercy Health",
        location="United States",
        url="https://remotive.com/jobs/1",
        description="Seeking a manager skilled in CMS compliance and EMR optimization.",
        tags=("CMS", "EMR"),
    )


@pytest.fixture
def empty_job():
    """A posting with no text at all."""
    return JobPosting(id="empty")
