"""Pytest configuration.

Every test gets its own in-memory SQLite database with foreign keys
switched on, so cascades behave like in production. The FastAPI app is
pointed at it by overriding the ``get_db`` dependency.
"""

import os

# Must be set before config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import app
from core.database import create_db_engine, get_db, init_db
from utils.reply_manager import ReplyManager
from utils.thread_manager import ThreadManager
from utils.user_manager import UserManager

STUDENT_PASSWORD = "Password1!"
TEACHER_PASSWORD = "P@ssw0rd!"


@pytest.fixture()
def engine():
    """Fresh in-memory database shared by all connections of one test."""
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture()
def db_session(session_factory):
    db = session_factory()
    yield db
    db.close()


@pytest.fixture()
def client(session_factory):
    """TestClient whose requests use the test database."""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def user_manager(db_session):
    return UserManager(db_session)


@pytest.fixture()
def thread_manager(db_session):
    return ThreadManager(db_session)


@pytest.fixture()
def reply_manager(db_session):
    return ReplyManager(db_session)


@pytest.fixture()
def student(user_manager):
    return user_manager.register("jeanine", "jeanine@student.ehb.be", STUDENT_PASSWORD)


@pytest.fixture()
def teacher(user_manager):
    return user_manager.register("bob", "bob@ehb.be", TEACHER_PASSWORD)


@pytest.fixture()
def thread(thread_manager, student):
    return thread_manager.create_thread(
        student.user_id,
        "How do I start",
        "Where can I find the first assignment?",
    )


@pytest.fixture()
def reply(reply_manager, thread, teacher):
    return reply_manager.create_reply(
        thread.thread_id, teacher.user_id, "Check the course page."
    )
