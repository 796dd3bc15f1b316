"""Résumé tailoring: reorder a candidate profile around a posting's keywords."""
import logging
from dataclasses import dataclass, field

from talent_agent.collectors.base import JobPosting
from talent_agent.matching.keyword_extractor import MAX_KEYWORDS, TITLE_WEIGHT, extract_keywords
from talent_agent.matching.relevance import LineScore, rank_lines
from talent_agent.profile import CandidateProfile

logger = logging.getLogger(__name__)

# How many highlights the summary sentence and cover letter name.
TOP_HIGHLIGHTS = 3

FALLBACK_TITLE = "the open role"
FALLBACK_COMPANY = "your organization"


@dataclass(frozen=True)
class ContactBlock:
    """Contact details copied from the profile."""

    full_name: str = ""
    headline: str = ""
    location: str = ""
    phone: str = ""
    email: str = ""


@dataclass(frozen=True)
class TailoredResume:
    """Job-specific résumé derived from one profile and one posting."""

    contact: ContactBlock
    source_job: JobPosting
    summary: str = ""
    keyword_highlights: tuple[str, ...] = field(default_factory=tuple)
    aligned_skills: tuple[str, ...] = field(default_factory=tuple)
    optimized_experience: tuple[str, ...] = field(default_factory=tuple)
    achievements: tuple[str, ...] = field(default_factory=tuple)
    education: str = ""
    cover_letter: str = ""

    def to_dict(self) -> dict:
        """Plain-data view with the keys delivery and UI payloads use."""
        return {
            "contact": {
                "fullName": self.contact.full_name,
                "headline": self.contact.headline,
                "location": self.contact.location,
                "phone": self.contact.phone,
                "email": self.contact.email,
            },
            "sourceJob": self.source_job.to_dict(),
            "summary": self.summary,
            "keywordHighlights": list(self.keyword_highlights),
            "alignedSkills": list(self.aligned_skills),
            "optimizedExperience": list(self.optimized_experience),
            "achievements": list(self.achievements),
            "education": self.education,
            "coverLetter": self.cover_letter,
        }


def split_skills(text: str) -> list[str]:
    """Comma-separated skills, trimmed, empties dropped."""
    return [part.strip() for part in (text or "").split(",") if part.strip()]


def split_lines(text: str) -> list[str]:
    """Newline-separated entries kept as written; blank lines dropped."""
    return [line for line in (text or "").splitlines() if line.strip()]


def join_phrases(items: list[str]) -> str:
    """'a', 'a and b', 'a, b, and c'."""
    if not items:
        return ""
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return ", ".join(items[:-1]) + f", and {items[-1]}"


class ResumeTailor:
    """Tailor candidate profiles to job postings.

    Stateless apart from its tuning knobs; one instance can serve any
    number of concurrent calls.
    """

    def __init__(
        self,
        max_keywords: int = MAX_KEYWORDS,
        title_weight: int = TITLE_WEIGHT,
        top_highlights: int = TOP_HIGHLIGHTS,
    ):
        """
        Initialize the tailor.

        Args:
            max_keywords: Cap on keywords extracted per posting
            title_weight: Weight of title occurrences during extraction
            top_highlights: Highlights named in the summary and cover letter
        """
        self.max_keywords = max_keywords
        self.title_weight = title_weight
        self.top_highlights = top_highlights

    def tailor(self, profile: CandidateProfile, job: JobPosting) -> TailoredResume:
        """
        Build the tailored résumé for ``job``.

        Never raises for well-formed input; empty profiles produce empty
        lists and a generic cover letter.
        """
        keywords = extract_keywords(job, max_keywords=self.max_keywords, title_weight=self.title_weight)

        skills = rank_lines(split_skills(profile.core_skills), keywords)
        experience = rank_lines(split_lines(profile.experience), keywords)
        achievements = rank_lines(split_lines(profile.achievements), keywords)

        highlights = self._highlights(keywords, skills + experience + achievements)

        logger.debug(
            "Tailored '%s' for %s: %d keywords, %d highlighted",
            profile.full_name, job.title, len(keywords), len(highlights),
        )

        return TailoredResume(
            contact=ContactBlock(
                full_name=profile.full_name,
                headline=profile.headline,
                location=profile.location,
                phone=profile.phone,
                email=profile.email,
            ),
            source_job=job,
            summary=self._summary(profile, job, highlights),
            keyword_highlights=tuple(highlights),
            aligned_skills=tuple(s.text for s in skills),
            optimized_experience=tuple(s.text for s in experience),
            achievements=tuple(s.text for s in achievements),
            education=profile.education,
            cover_letter=self._cover_letter(profile, job, highlights, skills),
        )

    @staticmethod
    def _highlights(keywords: list[str], scored: list[LineScore]) -> list[str]:
        """Keywords matched anywhere in the profile, in keyword order."""
        matched = {kw.lower() for line in scored for kw in line.matched_keywords}
        return [kw for kw in keywords if kw.lower() in matched]

    def _summary(self, profile: CandidateProfile, job: JobPosting, highlights: list[str]) -> str:
        """Profile summary plus a sentence tying it to the posting."""
        if not highlights:
            return profile.summary

        sentence = (
            f"Targeting {job.title.strip() or FALLBACK_TITLE} at "
            f"{job.company.strip() or FALLBACK_COMPANY} with proven strength in "
            f"{join_phrases(highlights[:self.top_highlights])}."
        )
        return f"{profile.summary} {sentence}" if profile.summary else sentence

    def _cover_letter(
        self,
        profile: CandidateProfile,
        job: JobPosting,
        highlights: list[str],
        skills: list[LineScore],
    ) -> str:
        """Greeting, opening, alignment paragraph, call to action, sign-off."""
        title = job.title.strip() or FALLBACK_TITLE
        company = job.company.strip() or FALLBACK_COMPANY
        headline = profile.headline.strip()

        greeting = f"Dear Hiring Team at {company},"

        opening = f"I am excited to apply for {title} at {company}."
        if headline:
            opening += f" As a {headline}, I have built my career on delivering measurable results."

        if highlights:
            top = highlights[:self.top_highlights]
            body = f"Your posting emphasizes {join_phrases(top)}, which maps directly to my background."
            matched_skills = [s.text for s in skills if s.score > 0][:self.top_highlights]
            if matched_skills:
                body += f" My core strengths in {join_phrases(matched_skills)} position me to contribute from day one."
        else:
            body = (
                "My background combines operational leadership with a consistent record of "
                "improving outcomes for the teams and organizations I support."
            )

        closing = (
            f"I would welcome the opportunity to discuss how I can help {company} "
            f"reach its goals. Thank you for your time and consideration."
        )

        sign_off = "Sincerely,"
        if profile.full_name.strip():
            sign_off += f"\n{profile.full_name.strip()}"

        return "\n\n".join([greeting, opening, body, closing, sign_off])


def tailor_resume(profile: CandidateProfile, job: JobPosting) -> TailoredResume:
    """Tailor ``profile`` to ``job`` with the default settings."""
    return ResumeTailor().tailor(profile, job)
