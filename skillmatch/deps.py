# skillmatch/deps.py
import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from skillmatch.database import get_db
from skillmatch.middleware.auth_middleware import require_user_id, optional_user_id
from skillmatch.models import User
from skillmatch.schemas.skills import SkillOut
from skillmatch.services import skill_store
from skillmatch.session import SessionContext

log = logging.getLogger("deps")


def _credentials_error() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_current_user(db: Session = Depends(get_db), user_id: int = Depends(require_user_id)) -> User:
    """Resolve the token subject to a User row."""
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise _credentials_error()
    return user


def build_session_context(db: Session, user: User) -> SessionContext:
    """
    Session context with the user's skills loaded from the store.
    Store errors propagate; callers decide how to surface them.
    """
    profile = user.profile
    return SessionContext(
        user_id=user.id,
        email=user.email,
        full_name=(profile.full_name if profile else "") or "",
        job_title=profile.job_title if profile else None,
        skills=[SkillOut.model_validate(s) for s in skill_store.list_skills(db, user.id)],
    )


def get_session_context(db: Session = Depends(get_db), user: User = Depends(get_current_user)) -> SessionContext:
    try:
        return build_session_context(db, user)
    except SQLAlchemyError:
        log.exception("could not load skills for user %s", user.id)
        db.rollback()
        raise HTTPException(status_code=503, detail="Could not load skills")


def optional_session_context(
    db: Session = Depends(get_db),
    user_id: Optional[int] = Depends(optional_user_id),
) -> Optional[SessionContext]:
    """Anonymous (or stale-token) requests get None instead of a 401."""
    if user_id is None:
        return None
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        return None
    try:
        return build_session_context(db, user)
    except SQLAlchemyError:
        log.exception("could not load skills for user %s", user_id)
        db.rollback()
        raise HTTPException(status_code=503, detail="Could not load skills")
