# skillmatch/routes/jobs.py
from fastapi import APIRouter, Depends, Query, HTTPException
from typing import List, Optional, Tuple
import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillmatch.config import MATCH_PERCENT_BASIS
from skillmatch.database import get_db
from skillmatch.deps import build_session_context, get_current_user
from skillmatch.models import User
from skillmatch.schemas.jobs import JobListResponse, JobPosting, MatchResponse
from skillmatch.services.job_catalog import list_active_jobs
from skillmatch.services.matcher import match
from skillmatch.session import SessionContext

log = logging.getLogger("routes.jobs")

# NOTE: Do NOT set a prefix here since main.py already includes this router with prefix="/api/v1"
router = APIRouter()

LOAD_ERROR = "Could not load skills/jobs"


def load_match_inputs(db: Session, user: User) -> Tuple[Optional[SessionContext], List[JobPosting]]:
    """
    Load both matcher inputs. On any store failure returns (None, []) so the
    matcher never sees partial data.
    """
    try:
        ctx = build_session_context(db, user)
        postings = list_active_jobs(db)
    except SQLAlchemyError:
        log.exception("loading match inputs failed for user %s", user.id)
        db.rollback()
        return None, []
    return ctx, postings


@router.get("/jobs", response_model=JobListResponse, tags=["Jobs"])
def jobs_list(db: Session = Depends(get_db)):
    """Active job catalog, unranked."""
    try:
        items = list_active_jobs(db)
    except SQLAlchemyError:
        log.exception("jobs_list failed")
        db.rollback()
        raise HTTPException(status_code=503, detail="Could not load jobs")
    return JobListResponse(total=len(items), items=items)


@router.get("/jobs/matches", response_model=MatchResponse, tags=["Jobs"])
def jobs_matches(
    basis: Optional[int] = Query(
        None, ge=1,
        description="Fixed denominator for match_percentage; omit to use each posting's own skill count",
    ),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Jobs ranked by overlap with the caller's skills.
    - postings with no overlap are left out
    - more matched skills first, catalog order on ties
    """
    basis = basis if basis is not None else MATCH_PERCENT_BASIS
    ctx, postings = load_match_inputs(db, user)
    if ctx is None:
        return MatchResponse(status="error", message=LOAD_ERROR, basis=basis)

    results = match(ctx.skill_names, postings, basis=basis)
    log.info("matches user=%s skills=%d postings=%d results=%d",
             user.id, len(ctx.skills), len(postings), len(results))
    return MatchResponse(skills=ctx.skill_names, basis=basis, total=len(results), items=results)
