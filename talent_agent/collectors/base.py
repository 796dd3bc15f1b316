"""Base collector interface."""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class JobPosting:
    """Standardized job posting handed to the tailoring engine."""

    id: str
    title: str = ""
    company: str = ""
    location: str = ""
    url: str = ""
    description: str = ""
    tags: tuple[str, ...] = field(default_factory=tuple)
    salary: Optional[str] = None
    published_at: Optional[str] = None

    def __post_init__(self):
        """Normalize fields after initialization."""
        # Frozen, so go through object.__setattr__
        object.__setattr__(self, "tags", tuple(t for t in (self.tags or ()) if isinstance(t, str)))
        for name in ("title", "company", "location", "url", "description"):
            if getattr(self, name) is None:
                object.__setattr__(self, name, "")

    def to_dict(self) -> dict:
        """Plain-data view using the job board payload keys."""
        return {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "url": self.url,
            "description": self.description,
            "tags": list(self.tags),
            "salary": self.salary,
            "publishedAt": self.published_at,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JobPosting":
        """Build a posting from :meth:`to_dict` output (or a saved job file)."""
        tags = data.get("tags")
        return cls(
            id=str(data.get("id", "")),
            title=data.get("title") or "",
            company=data.get("company") or "",
            location=data.get("location") or "",
            url=data.get("url") or "",
            description=data.get("description") or "",
            tags=tuple(tags) if isinstance(tags, (list, tuple)) else (),
            salary=data.get("salary"),
            published_at=data.get("publishedAt", data.get("published_at")),
        )


class BaseCollector(ABC):
    """Abstract base class for job collectors."""

    name: str = "base"

    @abstractmethod
    async def collect(self, search_queries: list[str]) -> list[JobPosting]:
        """
        Collect postings matching the search queries.

        Args:
            search_queries: List of search terms/job titles to search for.

        Returns:
            List of JobPosting objects.
        """
        pass

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"
