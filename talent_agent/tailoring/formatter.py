"""Plain-text rendering of tailored résumés for copy/paste and download."""
import re

from .tailor import TailoredResume


def _contact_header(resume: TailoredResume) -> str:
    contact = resume.contact
    details = " | ".join(
        part.strip()
        for part in (contact.location, contact.phone, contact.email)
        if part.strip()
    )
    lines = [contact.full_name.strip(), contact.headline.strip(), details]
    return "\n".join(line for line in lines if line)


def _section(label: str, body: str) -> str:
    return f"{label}\n{body}" if body else ""


def _bullets(items) -> str:
    return "\n".join(f"- {item}" for item in items)


def format_resume_text(resume: TailoredResume) -> str:
    """
    Render a tailored résumé as plain text.

    Sections appear in a fixed order and are left out entirely, heading
    included, when they have no content. The output depends only on the
    résumé, so identical input always gives identical text.
    """
    blocks = [
        _contact_header(resume),
        _section("SUMMARY", resume.summary.strip()),
        _section("KEYWORDS", " ".join(f"#{kw}" for kw in resume.keyword_highlights)),
        _section("CORE SKILLS", _bullets(resume.aligned_skills)),
        _section("EXPERIENCE", _bullets(resume.optimized_experience)),
        _section("ACHIEVEMENTS", _bullets(resume.achievements)),
        _section("EDUCATION", resume.education.strip()),
    ]
    blocks = [block for block in blocks if block]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"


def resume_filename(resume: TailoredResume) -> str:
    """Download name: ``<Full_Name>_<Job_Title>.txt``."""
    name = re.sub(r"\s+", "_", resume.contact.full_name.strip()) or "resume"
    title = re.sub(r"\s+", "_", resume.source_job.title.strip()) or "role"
    return f"{name}_{title}.txt"
