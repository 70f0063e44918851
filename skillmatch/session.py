# skillmatch/session.py
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from skillmatch.schemas.skills import SkillOut
from skillmatch.utils.text_normalize import skill_key


class SessionContext(BaseModel):
    """
    Per-request view of the signed-in user.

    Built from the bearer token and the skill store, then passed explicitly to
    the skill editor, the matcher call sites and the render descriptors.
    """
    user_id: int
    email: str
    full_name: str = ""
    job_title: Optional[str] = None
    skills: List[SkillOut] = Field(default_factory=list)

    @property
    def skill_names(self) -> List[str]:
        return [s.name for s in self.skills]

    @property
    def display_name(self) -> str:
        return self.full_name or self.email.split("@", 1)[0]

    def find(self, name: str) -> Optional[SkillOut]:
        """Case-insensitive lookup in the user's current set."""
        key = skill_key(name)
        for s in self.skills:
            if skill_key(s.name) == key:
                return s
        return None
