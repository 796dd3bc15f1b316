"""HTML email rendering for tailored applications."""
import html

from talent_agent.tailoring.tailor import TailoredResume

_H2 = '<h2 style="font-size: 16px; margin-top: 24px;">{}</h2>'


def sanitize_html(text: str) -> str:
    """Escape résumé or posting text for interpolation into HTML."""
    if not text:
        return ""
    return html.escape(str(text))


def _items(lines) -> str:
    return "".join(f"<li>{sanitize_html(line)}</li>" for line in lines)


def application_subject(resume: TailoredResume) -> str:
    """Subject line for an application email."""
    return f"Application: {resume.contact.full_name} for {resume.source_job.title}"


def render_html_email(resume: TailoredResume) -> str:
    """
    Render the application email body.

    Everything the email shows comes straight from the tailored résumé;
    no tailoring logic is repeated here.
    """
    job = resume.source_job
    contact = resume.contact
    contact_line = " · ".join(
        sanitize_html(part)
        for part in (contact.headline, contact.location, contact.phone, contact.email)
        if part
    )
    highlights = "".join(
        f'<span style="margin-right:8px;">#{sanitize_html(kw)}</span>'
        for kw in resume.keyword_highlights
    )
    url = sanitize_html(job.url)

    return f"""
    <div style="font-family: Arial, Helvetica, sans-serif; color: #0f172a;">
      <h1 style="font-size: 20px; margin-bottom: 8px;">{sanitize_html(contact.full_name)}</h1>
      <p style="margin: 0 0 12px;">{contact_line}</p>

      {_H2.format("Cover Letter")}
      <p style="white-space: pre-line;">{sanitize_html(resume.cover_letter)}</p>

      {_H2.format("Role Targeted")}
      <p>
        <strong>{sanitize_html(job.title)}</strong> at {sanitize_html(job.company)}<br/>
        Location: {sanitize_html(job.location)}<br/>
        <a href="{url}">{url}</a>
      </p>

      {_H2.format("Summary")}
      <p>{sanitize_html(resume.summary)}</p>

      {_H2.format("Keyword Alignment")}
      <p>{highlights}</p>

      {_H2.format("Core Strengths")}
      <ul>{_items(resume.aligned_skills)}</ul>

      {_H2.format("Experience Highlights")}
      <ul>{_items(resume.optimized_experience)}</ul>

      {_H2.format("Achievements")}
      <ul>{_items(resume.achievements)}</ul>

      {_H2.format("Education")}
      <p>{sanitize_html(resume.education)}</p>
    </div>
    """
