"""Talent Agent: tailor a candidate profile to job postings and send applications."""
from .collectors.base import JobPosting
from .profile import DEFAULT_PROFILE, CandidateProfile, load_profile, update_profile
from .tailoring import ResumeTailor, TailoredResume, format_resume_text, tailor_resume

__all__ = [
    "CandidateProfile",
    "DEFAULT_PROFILE",
    "JobPosting",
    "ResumeTailor",
    "TailoredResume",
    "format_resume_text",
    "load_profile",
    "tailor_resume",
    "update_profile",
]
