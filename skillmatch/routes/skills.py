# skillmatch/routes/skills.py
import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillmatch.database import get_db
from skillmatch.deps import get_session_context
from skillmatch.schemas.skills import SkillIn, SkillListResponse, SkillEditResponse
from skillmatch.services import skill_editor, skill_store
from skillmatch.session import SessionContext

log = logging.getLogger("routes.skills")

# NOTE: no prefix here; main.py mounts this router under /api/v1
router = APIRouter(tags=["Skills"])


def _store_failed(db: Session, action: str) -> HTTPException:
    log.exception("skill %s failed", action)
    db.rollback()
    return HTTPException(status_code=503, detail="Could not update skills")


@router.get("/skills", response_model=SkillListResponse)
def list_my_skills(ctx: SessionContext = Depends(get_session_context)):
    return SkillListResponse(total=len(ctx.skills), items=ctx.skills)


@router.post("/skills", response_model=SkillEditResponse)
def add_my_skill(
    body: SkillIn,
    response: Response,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
):
    """
    Add a skill. Blank names and names already present (any casing) are no-ops
    and answer 200 with changed=false; an actual insert answers 201.
    """
    try:
        outcome = skill_editor.add_skill(db, ctx, body.name, body.category)
    except SQLAlchemyError:
        raise _store_failed(db, "add")
    if outcome.changed:
        response.status_code = status.HTTP_201_CREATED
    return SkillEditResponse(changed=outcome.changed, skill=outcome.skill, skills=ctx.skills)


@router.delete("/skills", response_model=SkillEditResponse)
def remove_my_skill_by_name(
    name: str = Query(..., min_length=1, description="Skill name, any casing"),
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
):
    try:
        outcome = skill_editor.remove_skill(db, ctx, name)
    except SQLAlchemyError:
        raise _store_failed(db, "remove")
    return SkillEditResponse(changed=outcome.changed, skill=outcome.skill, skills=ctx.skills)


@router.delete("/skills/{skill_id}", status_code=204)
def remove_my_skill(
    skill_id: int,
    db: Session = Depends(get_db),
    ctx: SessionContext = Depends(get_session_context),
):
    try:
        skill_store.remove_skill(db, ctx.user_id, skill_id)
    except SQLAlchemyError:
        raise _store_failed(db, "remove")
    return Response(status_code=204)
