# skillmatch/schemas/views.py
from typing import Optional, List, Literal
from pydantic import BaseModel, Field

from skillmatch.schemas.jobs import MatchResult

class NavLink(BaseModel):
    path: str
    label: str
    active: bool = False

class NavAction(BaseModel):
    key: Literal["login", "signup", "logout"]
    label: str
    path: Optional[str] = None           # logout has no target page

class NavUser(BaseModel):
    display_name: str
    job_title: Optional[str] = None

class NavBar(BaseModel):
    variant: Literal["logged_in", "logged_out"]
    brand: str = "SkillMatch AI"
    links: List[NavLink]
    actions: List[NavAction]
    user: Optional[NavUser] = None

class SkillCard(BaseModel):
    id: int
    name: str
    icon: Literal["web", "database", "code"]

class SkillsPage(BaseModel):
    count: int = Field(..., ge=0)
    empty: bool
    cards: List[SkillCard]
    summary: Optional[str] = None

class JobsPage(BaseModel):
    variant: Literal["results", "empty", "error"]
    heading: str
    message: Optional[str] = None
    results: List[MatchResult] = Field(default_factory=list)
    summary: Optional[str] = None
