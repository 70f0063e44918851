from sqlalchemy.exc import OperationalError

from skillmatch.services.job_catalog import seed_catalog

from conftest import SCENARIO_JOBS


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_signup_login_me(client, auth_headers):
    r = client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "secret123"})
    assert r.status_code == 200
    assert r.json()["token_type"] == "bearer"

    me = client.get("/api/v1/auth/me", headers=auth_headers).json()
    assert me["email"] == "ada@example.com"
    assert me["full_name"] == "Ada Lovelace"
    assert me["skills"] == []


def test_signup_duplicate_email_any_casing(client, auth_headers):
    r = client.post("/api/v1/auth/signup", json={"email": "ADA@example.com", "password": "secret123"})
    assert r.status_code == 409


def test_login_bad_password(client, auth_headers):
    r = client.post("/api/v1/auth/login", json={"email": "ada@example.com", "password": "wrong-pass"})
    assert r.status_code == 401


def test_protected_routes_need_token(client):
    assert client.get("/api/v1/skills").status_code == 401
    assert client.get("/api/v1/jobs/matches").status_code == 401
    r = client.get("/api/v1/skills", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401


def test_skill_crud(client, auth_headers):
    r = client.post("/api/v1/skills", json={"name": "Java"}, headers=auth_headers)
    assert r.status_code == 201
    assert r.json()["changed"] is True

    r = client.post("/api/v1/skills", json={"name": "JAVA"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["changed"] is False
    assert [s["name"] for s in r.json()["skills"]] == ["Java"]

    r = client.post("/api/v1/skills", json={"name": "   "}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["changed"] is False

    client.post("/api/v1/skills", json={"name": "SQL"}, headers=auth_headers)
    listing = client.get("/api/v1/skills", headers=auth_headers).json()
    assert listing["total"] == 2

    r = client.delete("/api/v1/skills", params={"name": "java"}, headers=auth_headers)
    assert r.json()["changed"] is True
    assert [s["name"] for s in r.json()["skills"]] == ["SQL"]

    sql_id = r.json()["skills"][0]["id"]
    assert client.delete(f"/api/v1/skills/{sql_id}", headers=auth_headers).status_code == 204
    assert client.get("/api/v1/skills", headers=auth_headers).json()["total"] == 0


def test_jobs_catalog_active_only(client, db):
    seed_catalog(db, SCENARIO_JOBS + [dict(SCENARIO_JOBS[0], title="Closed", active=False)])
    r = client.get("/api/v1/jobs")
    assert r.status_code == 200
    titles = [j["title"] for j in r.json()["items"]]
    assert "Closed" not in titles
    assert len(titles) == 3


def test_matches_scenario(client, db, auth_headers):
    seed_catalog(db, SCENARIO_JOBS)
    for name in ("Java", "SQL", "React"):
        client.post("/api/v1/skills", json={"name": name}, headers=auth_headers)

    body = client.get("/api/v1/jobs/matches", headers=auth_headers).json()
    assert body["status"] == "ok"
    assert body["skills"] == ["Java", "SQL", "React"]
    assert [i["posting"]["title"] for i in body["items"]] == [
        "Java Developer", "Frontend Developer", "Database Administrator",
    ]
    assert [i["matched_skills"] for i in body["items"]] == [["Java", "SQL"], ["React"], ["SQL"]]
    assert [i["match_percentage"] for i in body["items"]] == [50, 25, 25]

    body = client.get("/api/v1/jobs/matches", params={"basis": 8}, headers=auth_headers).json()
    assert body["basis"] == 8
    assert [i["match_percentage"] for i in body["items"]] == [25, 13, 13]


def test_matches_without_skills_is_empty(client, db, auth_headers):
    seed_catalog(db, SCENARIO_JOBS)
    body = client.get("/api/v1/jobs/matches", headers=auth_headers).json()
    assert body["status"] == "ok"
    assert body["items"] == []


def test_matches_store_failure_is_error_state(client, db, auth_headers, monkeypatch):
    def boom(db):
        raise OperationalError("SELECT", {}, Exception("db down"))

    monkeypatch.setattr("skillmatch.routes.jobs.list_active_jobs", boom)
    r = client.get("/api/v1/jobs/matches", headers=auth_headers)
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "error"
    assert body["message"] == "Could not load skills/jobs"
    assert body["items"] == []


def test_profile_update(client, auth_headers):
    r = client.put("/api/v1/profile", json={"full_name": "Ada King", "job_title": "Engineer"},
                   headers=auth_headers)
    assert r.status_code == 200
    prof = client.get("/api/v1/profile/me", headers=auth_headers).json()
    assert prof["full_name"] == "Ada King"
    assert prof["job_title"] == "Engineer"


def test_ui_nav_variants(client, auth_headers):
    anon = client.get("/api/v1/ui/nav", params={"path": "/jobs"}).json()
    assert anon["variant"] == "logged_out"
    assert [a["key"] for a in anon["actions"]] == ["login", "signup"]

    member = client.get("/api/v1/ui/nav", headers=auth_headers).json()
    assert member["variant"] == "logged_in"
    assert member["user"]["display_name"] == "Ada Lovelace"
    assert "/profile" in [link["path"] for link in member["links"]]


def test_ui_jobs_page(client, db, auth_headers):
    seed_catalog(db, SCENARIO_JOBS)
    page = client.get("/api/v1/ui/jobs", headers=auth_headers).json()
    assert page["variant"] == "empty"

    client.post("/api/v1/skills", json={"name": "sql"}, headers=auth_headers)
    page = client.get("/api/v1/ui/jobs", headers=auth_headers).json()
    assert page["variant"] == "results"
    assert page["summary"] == "Found 2 Jobs"


def test_signup_race_on_email_index_is_409(client, monkeypatch):
    payload = {"email": "race@example.com", "password": "secret123"}
    assert client.post("/api/v1/auth/signup", json=payload).status_code == 201

    # the pre-check misses, as when another request commits in between
    monkeypatch.setattr("skillmatch.routes.auth._find_user", lambda db, email: None)
    r = client.post("/api/v1/auth/signup", json=payload)
    assert r.status_code == 409
    assert r.json()["detail"] == "Email already registered"
