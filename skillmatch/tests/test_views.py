from skillmatch import views
from skillmatch.schemas.skills import SkillOut
from skillmatch.services.matcher import match
from skillmatch.session import SessionContext

from conftest import posting


def ctx(**kw):
    base = dict(user_id=1, email="grace@example.com")
    base.update(kw)
    return SessionContext(**base)


def test_navbar_logged_out_marks_active_link():
    nav = views.navbar(None, "/skills")
    assert nav.variant == "logged_out"
    assert [link.label for link in nav.links] == ["Home", "Skills", "Jobs"]
    assert [link.active for link in nav.links] == [False, True, False]
    assert nav.user is None


def test_navbar_logged_in():
    nav = views.navbar(ctx(full_name="Grace Hopper", job_title="Software Developer"), "/profile")
    assert nav.variant == "logged_in"
    assert [link.label for link in nav.links] == ["Home", "Skills", "Jobs", "Profile"]
    assert nav.links[-1].active
    assert [a.key for a in nav.actions] == ["logout"]
    assert nav.user.display_name == "Grace Hopper"
    assert nav.user.job_title == "Software Developer"


def test_navbar_display_name_falls_back_to_email():
    assert views.navbar(ctx()).user.display_name == "grace"


def test_skills_page():
    skills = [SkillOut(id=1, name="React", category="web"),
              SkillOut(id=2, name="SQL", category="database"),
              SkillOut(id=3, name="Rust", category="systems")]
    page = views.skills_page(skills)
    assert page.count == 3
    assert [c.icon for c in page.cards] == ["web", "database", "code"]
    assert page.summary.startswith("You have 3 skills")

    single = views.skills_page(skills[:1])
    assert single.summary.startswith("You have 1 skill in")

    empty = views.skills_page([])
    assert empty.empty and empty.summary is None


def test_jobs_page_variants():
    results = match(["Java"], [posting(1, "Java")])
    page = views.jobs_page(["Java"], results)
    assert page.variant == "results"
    assert page.heading == "Based on your skills: Java"
    assert page.summary == "Found 1 Job"

    assert views.jobs_page(["Go"], []).variant == "empty"

    err = views.jobs_page([], [], error="Could not load skills/jobs")
    assert err.variant == "error"
    assert err.results == []


def test_skill_icon_follows_name_not_stored_category():
    page = views.skills_page([SkillOut(id=1, name="Java", category="database"),
                              SkillOut(id=2, name="MongoDB", category="code")])
    assert [c.icon for c in page.cards] == ["code", "database"]
