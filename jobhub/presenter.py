"""Display-ready views of search results and job details."""
from __future__ import annotations

from typing import Any

from jobhub.models import JobDetail, JobSummary
from jobhub.normalize import (
    format_date,
    format_experience_years,
    format_location,
    format_salary,
)

_DESCRIPTION_PREVIEW = 300


def _preview(text: str, limit: int = _DESCRIPTION_PREVIEW) -> str:
    text = " ".join(text.split())
    return text if len(text) <= limit else text[:limit].rstrip() + "…"


def summary_card(job: JobSummary) -> dict[str, Any]:
    return {
        "id": job.id,
        "title": job.title or "Untitled role",
        "employer": job.employer_name or "Unknown employer",
        "location": format_location(job.city, job.state),
        "salary": format_salary(job.salary_min, job.salary_max, job.salary_currency or None),
        "posted": format_date(job.posted_at),
        "employment_type": job.employment_type,
        "description": _preview(job.description),
        "apply_link": job.apply_link,
    }


def detail_card(detail: JobDetail) -> dict[str, Any]:
    card = summary_card(detail)
    card["description"] = detail.description
    card["google_link"] = detail.google_link
    card["experience"] = format_experience_years(detail.required_experience.required_months)
    card["expires"] = format_date(detail.expires_at) if detail.expires_at else ""
    # empty sections are left out
    card["highlights"] = {
        title: items
        for title, items in (
            ("Qualifications", detail.highlights.qualifications),
            ("Responsibilities", detail.highlights.responsibilities),
            ("Benefits", detail.highlights.benefits),
        )
        if items
    }
    return card


def summary_lines(index: int, job: JobSummary) -> list[str]:
    c = summary_card(job)
    lines = [
        f"{index}. {c['title']} — {c['employer']}",
        f"   {c['location']} | {c['salary']} | Posted {c['posted']}",
    ]
    if c["employment_type"]:
        lines[-1] += f" | {c['employment_type']}"
    lines.append(f"   id: {c['id']}")
    if c["apply_link"]:
        lines.append(f"   apply: {c['apply_link']}")
    return lines


def detail_lines(detail: JobDetail) -> list[str]:
    c = detail_card(detail)
    lines = [
        f"# {c['title']}",
        f"{c['employer']} — {c['location']}",
        "",
        f"Salary:     {c['salary']}",
        f"Type:       {c['employment_type'] or 'n/a'}",
        f"Posted:     {c['posted']}",
        f"Experience: {c['experience']}",
    ]
    if c["expires"]:
        lines.append(f"Expires:    {c['expires']}")
    if c["apply_link"]:
        lines.append(f"Apply:      {c['apply_link']}")
    if c["google_link"]:
        lines.append(f"Listing:    {c['google_link']}")
    for title, items in c["highlights"].items():
        lines += ["", f"## {title}"]
        lines += [f"- {item}" for item in items]
    if c["description"]:
        lines += ["", "## Description", c["description"]]
    return lines
