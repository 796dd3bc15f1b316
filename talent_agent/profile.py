"""Candidate profile: the editable base résumé that every posting is tailored from."""
import logging
from dataclasses import dataclass, fields, replace
from pathlib import Path

import yaml
from pydantic import BaseModel, ValidationError, field_validator

logger = logging.getLogger(__name__)


class ProfileLoadError(Exception):
    """Raised when a profile file cannot be read or does not validate."""

    def __init__(self, path: str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Could not load profile {path}: {reason}")


@dataclass(frozen=True)
class CandidateProfile:
    """Free-text résumé input. Every field is opaque text and may be empty."""

    full_name: str = ""
    headline: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    core_skills: str = ""  # comma-separated
    achievements: str = ""  # one per line
    experience: str = ""  # one per line
    education: str = ""


DEFAULT_PROFILE = CandidateProfile(
    full_name="Jordan Blake",
    headline="Senior Healthcare Operations Manager",
    email="jordan.blake@email.com",
    phone="+1 (555) 219-3044",
    location="Austin, TX",
    summary=(
        "Specializing in US healthcare service lines with a focus on value-based care, "
        "payer collaboration, and scalable operational excellence."
    ),
    core_skills=(
        "Value-Based Care, CMS Compliance, Quality Metrics, EMR Optimization, "
        "Change Management, Lean Six Sigma, Payer Relations, Team Leadership, "
        "Budget Oversight, Workforce Planning"
    ),
    achievements="\n".join([
        "Delivered 18% cost reduction across ambulatory clinics through performance dashboards and staffing redesign.",
        "Implemented interdisciplinary rounding improving HCAHPS satisfaction by 21% within twelve months.",
        "Expanded population health programs to 14 states, adding $42M annual recurring revenue.",
    ]),
    experience="\n".join([
        "Directed 250+ FTE healthcare delivery network covering acute and ambulatory service lines.",
        "Negotiated payer contracts aligned with Medicare quality incentives and bundled payments.",
        "Built analytics PMO integrating Epic, Salesforce, and Tableau to monitor provider performance.",
        "Launched leadership accelerators to improve RN manager retention by 15%.",
        "Managed $120M operating budget with variance consistently under 2%.",
    ]),
    education=(
        "Master of Health Administration, University of Michigan — "
        "Bachelor of Science in Nursing, Emory University"
    ),
)

PROFILE_FIELDS = tuple(f.name for f in fields(CandidateProfile))


class ProfileFile(BaseModel):
    """Schema for profile.yaml. Multi-line fields may be given as YAML lists."""

    full_name: str = ""
    headline: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    summary: str = ""
    core_skills: str = ""
    achievements: str = ""
    experience: str = ""
    education: str = ""

    @field_validator("core_skills", mode="before")
    @classmethod
    def join_skill_list(cls, v):
        """Accept a list of skills and join it with commas."""
        if isinstance(v, list):
            return ", ".join(str(item).strip() for item in v if item is not None)
        return "" if v is None else v

    @field_validator("achievements", "experience", mode="before")
    @classmethod
    def join_line_list(cls, v):
        """Accept a list of lines and join it with newlines."""
        if isinstance(v, list):
            return "\n".join(str(item).strip() for item in v if item is not None)
        return "" if v is None else v

    @field_validator(
        "full_name", "headline", "email", "phone", "location", "summary", "education",
        mode="before",
    )
    @classmethod
    def none_to_empty(cls, v):
        """Blank YAML values load as None; treat them as empty text."""
        return "" if v is None else v


def load_profile(path: str | Path) -> CandidateProfile:
    """
    Load a candidate profile from a YAML file.

    Args:
        path: Path to profile.yaml

    Returns:
        CandidateProfile built from the file

    Raises:
        ProfileLoadError: If the file is missing, not YAML, or fails validation
    """
    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ProfileLoadError(str(path), str(e)) from e

    if not isinstance(raw, dict):
        raise ProfileLoadError(str(path), "top level must be a mapping")

    try:
        parsed = ProfileFile(**raw)
    except ValidationError as e:
        raise ProfileLoadError(str(path), str(e)) from e

    logger.debug("Loaded profile for %s from %s", parsed.full_name or "<unnamed>", path)
    return CandidateProfile(**parsed.model_dump())


def update_profile(profile: CandidateProfile, field_name: str, value: str) -> CandidateProfile:
    """Return a copy of ``profile`` with one field replaced.

    This is the state transition a form edit performs; the original value
    is left untouched.
    """
    if field_name not in PROFILE_FIELDS:
        raise ValueError(f"Unknown profile field: {field_name}")
    return replace(profile, **{field_name: value})
