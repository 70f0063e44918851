# skillmatch/services/job_catalog.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence

from sqlalchemy.orm import Session

from skillmatch.constants import DEMO_JOBS, DEMO_LOCATIONS
from skillmatch.models import Job
from skillmatch.schemas.jobs import JobPosting
from skillmatch.utils.text_normalize import clean_skill_name, norm_employment_type

log = logging.getLogger("jobs.catalog")


def list_active_jobs(db: Session) -> List[JobPosting]:
    """Snapshot of the active catalog, in id order."""
    rows = db.query(Job).filter(Job.is_active.is_(True)).order_by(Job.id).all()
    return [JobPosting.model_validate(r) for r in rows]


def _describe(company: str, title: str, skills: Sequence[str]) -> str:
    return (
        f"Join {company} as a {title}. We're looking for someone with experience in "
        f"{', '.join(skills[:3])}. This is a great opportunity to work with "
        f"cutting-edge technologies and grow your career."
    )


def build_job(template: Dict[str, Any], location: str, description: Optional[str] = None) -> Job:
    """Turn a template dict (title/company/skills/salary/type) into a Job row."""
    skills = [clean_skill_name(s) for s in template.get("skills", [])]
    skills = [s for s in skills if s]
    return Job(
        title=template["title"],
        company=template["company"],
        location=location,
        salary_range=template.get("salary"),
        job_type=norm_employment_type(template.get("type")) or "full-time",
        description=description or _describe(template["company"], template["title"], skills),
        required_skills=skills,
        is_active=template.get("active", True),
    )


def seed_catalog(db: Session, templates: Optional[Sequence[Dict[str, Any]]] = None) -> int:
    """
    Load the demo postings when the jobs table is empty.

    Returns:
      number of rows inserted (0 if the catalog already had data).
    """
    if db.query(Job.id).first() is not None:
        return 0
    templates = DEMO_JOBS if templates is None else templates
    for i, t in enumerate(templates):
        db.add(build_job(t, DEMO_LOCATIONS[i % len(DEMO_LOCATIONS)]))
    db.commit()
    log.info("seeded %d job postings", len(templates))
    return len(templates)
