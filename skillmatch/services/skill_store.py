# skillmatch/services/skill_store.py
from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from skillmatch.models import Skill, UserSkill
from skillmatch.utils.text_normalize import clean_skill_name, skill_key, infer_category

log = logging.getLogger("skills.store")


def find_skill(db: Session, name: str) -> Optional[Skill]:
    """Canonical skill entity for `name`, matched case-insensitively."""
    key = skill_key(name)
    if not key:
        return None
    return db.query(Skill).filter(Skill.name_key == key).first()


def _get_or_create_skill(db: Session, name: str, category: Optional[str]) -> Skill:
    skill = find_skill(db, name)
    if skill:
        return skill
    skill = Skill(name=name, name_key=skill_key(name), category=(category or infer_category(name)))
    db.add(skill)
    try:
        db.flush()
    except IntegrityError:
        # lost a race on skills.name_key; nothing else is pending here
        db.rollback()
        log.info("skill %r created concurrently; reusing canonical row", name)
        skill = find_skill(db, name)
        if skill is None:
            raise
    return skill


def list_skills(db: Session, user_id: int) -> List[Skill]:
    """User's skills in the order they were added."""
    rows = (
        db.query(UserSkill)
        .filter(UserSkill.user_id == user_id)
        .order_by(UserSkill.id)
        .all()
    )
    return [r.skill for r in rows]


def link_skill(db: Session, user_id: int, name: str, category: Optional[str] = None) -> Tuple[Skill, bool]:
    """
    Associate `name` with the user.

    Resolves the skill case-insensitively first so casings never fork the
    entity.

    Returns:
      (canonical Skill, True if a new association was created).

    Raises:
      ValueError if the name is blank.
    """
    name = clean_skill_name(name)
    if not name:
        raise ValueError("Skill name must not be empty")

    skill = _get_or_create_skill(db, name, category)
    skill_id = skill.id
    link = (
        db.query(UserSkill)
        .filter(UserSkill.user_id == user_id, UserSkill.skill_id == skill_id)
        .first()
    )
    created = False
    if link is None:
        db.add(UserSkill(user_id=user_id, skill_id=skill_id))
        try:
            db.commit()
            created = True
            log.info("user %s added skill %s (%r)", user_id, skill_id, name)
        except IntegrityError:
            # same association committed by another request first
            db.rollback()
    else:
        db.commit()
    return db.get(Skill, skill_id), created


def add_skill(db: Session, user_id: int, name: str, category: Optional[str] = None) -> Skill:
    """Idempotent: an existing association returns the same Skill unchanged."""
    skill, _ = link_skill(db, user_id, name, category)
    return skill


def unlink_skill(db: Session, user_id: int, skill_id: int) -> bool:
    """Drop the association; the shared Skill row stays. Returns whether a row went away."""
    deleted = (
        db.query(UserSkill)
        .filter(UserSkill.user_id == user_id, UserSkill.skill_id == skill_id)
        .delete(synchronize_session=False)
    )
    db.commit()
    if deleted:
        log.info("user %s removed skill %s", user_id, skill_id)
    return bool(deleted)


def remove_skill(db: Session, user_id: int, skill_id: int) -> None:
    """No-op if the user does not have the skill."""
    unlink_skill(db, user_id, skill_id)
