# skillmatch/views.py
"""
Render descriptors: plain data the front end turns into markup.

Every function here is pure. The session variant (signed in or not) is an
argument, never looked up.
"""
from __future__ import annotations

from typing import List, Optional, Sequence

from skillmatch.schemas.jobs import MatchResult
from skillmatch.schemas.skills import SkillOut
from skillmatch.schemas.views import (
    NavAction, NavBar, NavLink, NavUser, SkillCard, SkillsPage, JobsPage,
)
from skillmatch.session import SessionContext
from skillmatch.utils.text_normalize import infer_category

BASE_LINKS = [("/", "Home"), ("/skills", "Skills"), ("/jobs", "Jobs")]
MEMBER_LINKS = BASE_LINKS + [("/profile", "Profile")]


def _plural(n: int, word: str) -> str:
    return f"{n} {word}{'' if n == 1 else 's'}"


def navbar(ctx: Optional[SessionContext], path: str = "/") -> NavBar:
    if ctx is None:
        return NavBar(
            variant="logged_out",
            links=[NavLink(path=p, label=label, active=(p == path)) for p, label in BASE_LINKS],
            actions=[
                NavAction(key="login", label="Login", path="/login"),
                NavAction(key="signup", label="Sign Up", path="/signup"),
            ],
        )
    return NavBar(
        variant="logged_in",
        links=[NavLink(path=p, label=label, active=(p == path)) for p, label in MEMBER_LINKS],
        actions=[NavAction(key="logout", label="Logout")],
        user=NavUser(display_name=ctx.display_name, job_title=ctx.job_title),
    )


def skills_page(skills: Sequence[SkillOut]) -> SkillsPage:
    cards = [
        SkillCard(
            id=s.id,
            name=s.name,
            icon=infer_category(s.name),
        )
        for s in skills
    ]
    summary = None
    if cards:
        summary = (
            f"You have {_plural(len(cards), 'skill')} in your profile. "
            "These skills will be used to match you with relevant job opportunities."
        )
    return SkillsPage(count=len(cards), empty=not cards, cards=cards, summary=summary)


def jobs_page(skill_names: Sequence[str], results: List[MatchResult], error: Optional[str] = None) -> JobsPage:
    heading = f"Based on your skills: {', '.join(skill_names)}"
    if error:
        return JobsPage(variant="error", heading=heading, message=error)
    if not results:
        return JobsPage(
            variant="empty",
            heading=heading,
            message=(
                "We couldn't find any jobs matching your current skills. "
                "Try adding more skills to improve your job recommendations."
            ),
        )
    return JobsPage(
        variant="results",
        heading=heading,
        results=results,
        summary=f"Found {_plural(len(results), 'Job')}",
    )
