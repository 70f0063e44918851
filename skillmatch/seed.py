# skillmatch/seed.py
"""
Load the demo catalog and, optionally, a demo user.

    python -m skillmatch.seed
    python -m skillmatch.seed --email demo@example.com --password demo1234
"""
import argparse
import logging

from skillmatch.constants import DEMO_SKILLS
from skillmatch.database import Base, SessionLocal, engine
from skillmatch.models import Profile, User
from skillmatch.security import hash_password, normalize_email
from skillmatch.services import skill_store
from skillmatch.services.job_catalog import seed_catalog

log = logging.getLogger("seed")


def seed_user(db, email: str, password: str, full_name: str = "") -> User:
    """Create the user if missing and give them the demo skills."""
    email = normalize_email(email)
    user = db.query(User).filter_by(email=email).first()
    if user:
        log.info("user %s already exists", email)
    else:
        user = User(email=email, password_hash=hash_password(password))
        user.profile = Profile(full_name=full_name)
        db.add(user)
        db.commit()
        db.refresh(user)
        log.info("seeded user %s", email)
    for name in DEMO_SKILLS:
        skill_store.add_skill(db, user.id, name)
    return user


def main(argv=None) -> None:
    parser = argparse.ArgumentParser(description="Seed the SkillMatch database")
    parser.add_argument("--email", help="also create a demo user with this email")
    parser.add_argument("--password", default="demo1234")
    parser.add_argument("--full-name", default="Demo User")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        n = seed_catalog(db)
        log.info("catalog: %d postings inserted", n)
        if args.email:
            seed_user(db, args.email, args.password, args.full_name)
    finally:
        db.close()


if __name__ == "__main__":
    main()
