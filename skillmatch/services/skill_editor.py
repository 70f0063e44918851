# skillmatch/services/skill_editor.py
from __future__ import annotations

import logging
import threading
from typing import NamedTuple, Optional

from sqlalchemy.orm import Session

from skillmatch.schemas.skills import SkillOut
from skillmatch.services import skill_store
from skillmatch.session import SessionContext
from skillmatch.utils.text_normalize import clean_skill_name

log = logging.getLogger("skills.editor")

# striped locks: mutations for the same user run one at a time, memory stays fixed
_LOCK_STRIPES = 64
_locks = [threading.Lock() for _ in range(_LOCK_STRIPES)]


def _user_lock(user_id: int) -> threading.Lock:
    return _locks[user_id % _LOCK_STRIPES]


class EditOutcome(NamedTuple):
    changed: bool
    skill: Optional[SkillOut] = None


def add_skill(db: Session, ctx: SessionContext, name: str, category: Optional[str] = None) -> EditOutcome:
    """
    Add `name` to the user's skill set.

    No-op when the trimmed name is empty or the user already has it under any
    casing. Presence is decided by the store under the user's lock, not by the
    `ctx` snapshot. `ctx.skills` is brought in line with the store afterwards.
    """
    name = clean_skill_name(name)
    if not name:
        return EditOutcome(changed=False)

    with _user_lock(ctx.user_id):
        row, created = skill_store.link_skill(db, ctx.user_id, name, category)
        skill = SkillOut.model_validate(row)
        if ctx.find(skill.name) is None:
            ctx.skills.append(skill)
        if not created:
            log.debug("add_skill no-op: %r already present as %r", name, skill.name)
        return EditOutcome(changed=created, skill=skill)


def remove_skill(db: Session, ctx: SessionContext, name: str) -> EditOutcome:
    """Remove `name` (any casing) from the user's set. No-op if not present."""
    with _user_lock(ctx.user_id):
        row = skill_store.find_skill(db, name)
        if row is None:
            return EditOutcome(changed=False)

        skill = SkillOut.model_validate(row)
        removed = skill_store.unlink_skill(db, ctx.user_id, skill.id)
        ctx.skills = [s for s in ctx.skills if s.id != skill.id]
        return EditOutcome(changed=removed, skill=skill if removed else None)
