# skillmatch/routes/profile.py
from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from skillmatch.database import get_db
from skillmatch.deps import get_current_user
from skillmatch.models import Profile, User

router = APIRouter(prefix="/profile", tags=["Profile"])

# ---- Schemas ----
class ProfileIn(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=200)
    job_title: Optional[str] = Field(None, max_length=200)

class ProfileOut(ProfileIn):
    id: int
    email: str

# ---- Helpers ----
def _ensure_profile(db: Session, user: User) -> Profile:
    prof = db.query(Profile).filter(Profile.user_id == user.id).first()
    if not prof:
        prof = Profile(user_id=user.id, full_name="")
    return prof

def _out(prof: Profile, user: User) -> ProfileOut:
    return ProfileOut(id=prof.id, email=user.email, full_name=prof.full_name or user.email,
                      job_title=prof.job_title)

# ---- Routes ----
@router.get("/me", response_model=ProfileOut)
def read_my_profile(
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    prof = _ensure_profile(db, user)
    if prof.id is None:
        db.add(prof); db.commit(); db.refresh(prof)
    return _out(prof, user)

@router.put("", response_model=ProfileOut)
def upsert_profile(
    body: ProfileIn,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """
    Idempotent upsert:
    - create if none exists for this user
    - update otherwise
    """
    prof = _ensure_profile(db, user)
    prof.full_name = body.full_name.strip()
    prof.job_title = (body.job_title or "").strip() or None

    db.add(prof)
    db.commit()
    db.refresh(prof)
    return _out(prof, user)
