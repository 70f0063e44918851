import os

# must be set before skillmatch.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENV"] = "test"
os.environ["SEED_JOBS"] = "false"
os.environ["USE_AUTH_MIDDLEWARE"] = "false"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["MATCH_PERCENT_BASIS"] = "required"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from skillmatch import models  # noqa: E402,F401
from skillmatch.database import Base, SessionLocal, engine  # noqa: E402
from skillmatch.main import app  # noqa: E402
from skillmatch.schemas.jobs import JobPosting  # noqa: E402

# postings from the Jobs page scenario
SCENARIO_JOBS = [
    {"title": "Frontend Developer", "company": "TechCorp",
     "skills": ["React", "JavaScript", "CSS", "HTML"], "type": "Full-time"},
    {"title": "Java Developer", "company": "Enterprise Solutions",
     "skills": ["Java", "SQL", "Spring", "Maven"], "type": "Full-time"},
    {"title": "Database Administrator", "company": "DataFlow Inc",
     "skills": ["SQL", "PostgreSQL", "MySQL", "Python"], "type": "Full-time"},
]


def posting(id, *skills, title=None):
    return JobPosting(id=id, title=title or f"Job {id}", company="Acme", required_skills=list(skills))


@pytest.fixture
def scenario_postings():
    return [posting(i + 1, *t["skills"], title=t["title"]) for i, t in enumerate(SCENARIO_JOBS)]


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers(client):
    r = client.post("/api/v1/auth/signup", json={
        "email": "Ada@Example.com", "password": "secret123", "full_name": "Ada Lovelace",
    })
    assert r.status_code == 201
    return {"Authorization": f"Bearer {r.json()['access_token']}"}
