"""Job collectors for various sources."""
from .base import BaseCollector, JobPosting
from .remotive_collector import RemotiveCollector, normalize_remotive_job

__all__ = [
    "BaseCollector",
    "JobPosting",
    "RemotiveCollector",
    "normalize_remotive_job",
]
