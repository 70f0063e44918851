# skillmatch/models.py
from __future__ import annotations

from sqlalchemy import (
    Column, Integer, String, Text, DateTime, ForeignKey, Index, Boolean, UniqueConstraint, JSON
)
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.ext.mutable import MutableList
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func as sa_func

from skillmatch.database import Base

# JSONB on Postgres, plain JSON elsewhere (e.g., SQLite)
JSONType = JSON().with_variant(JSONB(), "postgresql")


# =======================
# User model
# =======================
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password_hash = Column(String(255), nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=sa_func.now())
    updated_at = Column(DateTime, nullable=False, server_default=sa_func.now(), onupdate=sa_func.now())

    # Relationships
    profile = relationship(
        "Profile",
        back_populates="user",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    skill_links = relationship(
        "UserSkill",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="UserSkill.id",
    )

    # Case-insensitive unique email
    __table_args__ = (
        Index("uq_users_email_lower", sa_func.lower(email), unique=True),
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r}>"


# =======================
# Profile model
# =======================
class Profile(Base):
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, index=True, nullable=False)

    full_name = Column(String(255), nullable=False, default="")
    job_title = Column(String(255), nullable=True)

    created_at = Column(DateTime, nullable=False, server_default=sa_func.now())
    updated_at = Column(DateTime, nullable=False, server_default=sa_func.now(), onupdate=sa_func.now())

    user = relationship("User", back_populates="profile", passive_deletes=True)

    def __repr__(self) -> str:
        return f"<Profile id={self.id} user_id={self.user_id} full_name={self.full_name!r}>"


# =======================
# Skill model (shared catalog of skill names)
# =======================
class Skill(Base):
    __tablename__ = "skills"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    # skill_key(name), computed in Python; SQLite's lower() only folds ASCII.
    # One entity per key regardless of casing ("Java" == "JAVA", "Élixir" == "élixir")
    name_key = Column(String(100), nullable=False, unique=True, index=True)
    category = Column(String(50), nullable=False, default="code")

    created_at = Column(DateTime, nullable=False, server_default=sa_func.now())

    def __repr__(self) -> str:
        return f"<Skill id={self.id} name={self.name!r}>"


# =======================
# UserSkill model (user <-> skill association)
# =======================
class UserSkill(Base):
    __tablename__ = "user_skills"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), index=True, nullable=False)
    skill_id = Column(Integer, ForeignKey("skills.id", ondelete="CASCADE"), index=True, nullable=False)

    created_at = Column(DateTime, nullable=False, server_default=sa_func.now())

    user = relationship("User", back_populates="skill_links", passive_deletes=True)
    skill = relationship("Skill", lazy="joined")

    __table_args__ = (
        UniqueConstraint("user_id", "skill_id", name="uq_user_skills_user_skill"),
    )

    def __repr__(self) -> str:
        return f"<UserSkill user_id={self.user_id} skill_id={self.skill_id}>"


# =======================
# Job model (read-only catalog for the matcher)
# =======================
class Job(Base):
    __tablename__ = "jobs"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(200), nullable=False, index=True)
    company = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False, default="")
    salary_range = Column(String(100), nullable=True)
    job_type = Column(String(50), nullable=False, default="full-time")
    description = Column(Text, nullable=False, default="")

    # Ordered list of skill names
    required_skills = Column(MutableList.as_mutable(JSONType), nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True, index=True)

    created_at = Column(DateTime, nullable=False, server_default=sa_func.now())
    updated_at = Column(DateTime, nullable=False, server_default=sa_func.now(), onupdate=sa_func.now())

    def __repr__(self) -> str:
        return f"<Job id={self.id} title={self.title!r} company={self.company!r}>"
