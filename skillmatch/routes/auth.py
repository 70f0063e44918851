# skillmatch/routes/auth.py
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, EmailStr, Field
from sqlalchemy import func as sa_func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillmatch.database import get_db
from skillmatch.deps import get_session_context
from skillmatch.middleware.auth_middleware import create_access_token
from skillmatch.models import Profile, User
from skillmatch.security import hash_password, verify_password, normalize_email
from skillmatch.session import SessionContext

log = logging.getLogger("routes.auth")

router = APIRouter(prefix="/auth", tags=["Auth (JWT)"])


class AuthPayload(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)

class SignupPayload(AuthPayload):
    full_name: Optional[str] = Field(None, max_length=200)

class TokenOut(BaseModel):
    access_token: str
    token_type: str = "bearer"


def _find_user(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(sa_func.lower(User.email) == normalize_email(email)).first()

def _token_for(user: User) -> TokenOut:
    return TokenOut(access_token=create_access_token(sub=str(user.id), extra={"email": user.email}))


@router.post("/signup", response_model=TokenOut, status_code=201)
def signup(body: SignupPayload, db: Session = Depends(get_db)):
    if _find_user(db, body.email):
        raise HTTPException(status_code=409, detail="Email already registered")
    user = User(email=normalize_email(body.email), password_hash=hash_password(body.password))
    user.profile = Profile(full_name=(body.full_name or "").strip())
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # concurrent signup won the unique email index
        db.rollback()
        raise HTTPException(status_code=409, detail="Email already registered")
    db.refresh(user)
    log.info("signup user_id=%s", user.id)
    return _token_for(user)

@router.post("/login", response_model=TokenOut)
def login(body: AuthPayload, db: Session = Depends(get_db)):
    user = _find_user(db, body.email)
    if not user or not verify_password(body.password, user.password_hash):
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _token_for(user)

@router.get("/me", response_model=SessionContext)
def me(ctx: SessionContext = Depends(get_session_context)):
    return ctx
