# skillmatch/routes/ui.py
from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from skillmatch.config import MATCH_PERCENT_BASIS
from skillmatch.database import get_db
from skillmatch.deps import get_current_user, get_session_context, optional_session_context
from skillmatch.models import User
from skillmatch.routes.jobs import LOAD_ERROR, load_match_inputs
from skillmatch.schemas.views import NavBar, SkillsPage, JobsPage
from skillmatch.services.matcher import match
from skillmatch.session import SessionContext
from skillmatch import views

router = APIRouter(prefix="/ui", tags=["UI"])


@router.get("/nav", response_model=NavBar)
def nav(
    path: str = Query("/", description="Current page path, marks the active link"),
    ctx: Optional[SessionContext] = Depends(optional_session_context),
):
    return views.navbar(ctx, path)


@router.get("/skills", response_model=SkillsPage)
def skills_view(ctx: SessionContext = Depends(get_session_context)):
    return views.skills_page(ctx.skills)


@router.get("/jobs", response_model=JobsPage)
def jobs_view(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    ctx, postings = load_match_inputs(db, user)
    if ctx is None:
        return views.jobs_page([], [], error=LOAD_ERROR)
    results = match(ctx.skill_names, postings, basis=MATCH_PERCENT_BASIS)
    return views.jobs_page(ctx.skill_names, results)
