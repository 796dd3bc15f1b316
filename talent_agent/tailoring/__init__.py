"""Résumé tailoring and rendering."""
from .formatter import format_resume_text, resume_filename
from .tailor import ContactBlock, ResumeTailor, TailoredResume, tailor_resume

__all__ = [
    "ContactBlock",
    "ResumeTailor",
    "TailoredResume",
    "format_resume_text",
    "resume_filename",
    "tailor_resume",
]
