"""Seed the database with initial demo data.

Running this module creates missing tables, clears replies, threads and
users, and inserts a small forum: one student, one teacher, one admin, two
threads and two replies. The admin account can only be created this way.

Usage:
    python src/seed.py
"""

import logging
from typing import Dict

from sqlalchemy.orm import Session

from core.database import SessionLocal, init_db
from core.logging_config import setup_logging
from models.reply import ReplyModel
from models.thread import ThreadModel
from models.user import UserModel
from utils.passwords import hash_password

logger = logging.getLogger(__name__)

SEED_USERS = [
    {"username": "jeanine", "email": "jeanine@student.ehb.be", "password": "password123", "role": "student"},
    {"username": "bob", "email": "bob@ehb.be", "password": "password456", "role": "teacher"},
    {"username": "ella", "email": "ella@ehb.be", "password": "password789", "role": "admin"},
]

SEED_THREADS = [
    {
        "author": "jeanine",
        "title": "Non Anonymous Thread",
        "content": "This is the content of the first thread.",
        "posted_anonymously": False,
    },
    {
        "author": "jeanine",
        "title": "Anonymous Thread",
        "content": "This is the content of the second thread.",
        "posted_anonymously": True,
    },
]

SEED_REPLIES = [
    {
        "author": "bob",
        "thread": "Non Anonymous Thread",
        "content": "This is a reply to the non anonymous thread that is correct.",
        "correct": True,
    },
    {
        "author": "ella",
        "thread": "Anonymous Thread",
        "content": "This is a reply to the anonymous thread that is not checked.",
        "correct": False,
    },
]


def seed_initial_data(db: Session) -> Dict[str, int]:
    """Replace all forum content with the demo data set.

    Args:
        db: SQLAlchemy Session.

    Returns:
        Number of inserted rows per table.
    """
    db.query(ReplyModel).delete()
    db.query(ThreadModel).delete()
    db.query(UserModel).delete()

    users = {}
    for entry in SEED_USERS:
        user = UserModel(
            username=entry["username"],
            email=entry["email"],
            password=hash_password(entry["password"]),
            role=entry["role"],
        )
        db.add(user)
        users[entry["username"]] = user
    db.flush()

    threads = {}
    for entry in SEED_THREADS:
        thread = ThreadModel(
            user_id=users[entry["author"]].user_id,
            title=entry["title"],
            content=entry["content"],
            posted_anonymously=entry["posted_anonymously"],
        )
        db.add(thread)
        threads[entry["title"]] = thread
    db.flush()

    for entry in SEED_REPLIES:
        db.add(
            ReplyModel(
                user_id=users[entry["author"]].user_id,
                thread_id=threads[entry["thread"]].thread_id,
                content=entry["content"],
                correct=entry["correct"],
            )
        )
    db.commit()

    counts = {
        "users": len(SEED_USERS),
        "threads": len(SEED_THREADS),
        "replies": len(SEED_REPLIES),
    }
    logger.info("Seeded database: %s", counts)
    return counts


def main() -> None:
    setup_logging()
    init_db()
    db = SessionLocal()
    try:
        counts = seed_initial_data(db)
    finally:
        db.close()
    print(
        f"Seeded {counts['users']} users, {counts['threads']} threads "
        f"and {counts['replies']} replies."
    )


if __name__ == "__main__":
    main()
