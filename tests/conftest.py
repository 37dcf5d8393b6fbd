# tests/conftest.py
from __future__ import annotations

import os
from collections.abc import Callable, Generator, Iterator
from typing import Any

import pytest

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("PASSWORD_HASH_ITERATIONS", "1000")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ripple.core.security import create_access_token
from ripple.db.session import Base, enable_sqlite_foreign_keys
from ripple.db.session import get_db as app_get_session
from ripple.main import app as fastapi_app
from ripple.models import Post, PrivacyLevel, Profile
from ripple.schemas.post import PostCreate
from ripple.schemas.profile import SignupRequest
from ripple.services import post_service, user_service

TEST_DB_URL = "sqlite://"
TEST_PASSWORD = "correct horse battery"


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Services commit, so every test starts from empty tables instead.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


def auth_headers(user: Profile) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(user.id)}"}


@pytest.fixture()
def make_user(db_session: Session) -> Callable[..., Profile]:
    """Register accounts through the real signup path."""

    def _make_user(
        email: str,
        first_name: str,
        last_name: str | None = None,
        display_name: str | None = None,
    ) -> Profile:
        profile, _ = user_service.create_account(
            db_session,
            SignupRequest(
                email=email,
                password=TEST_PASSWORD,
                first_name=first_name,
                last_name=last_name,
                display_name=display_name,
            ),
        )
        return profile

    return _make_user


@pytest.fixture()
def make_post(db_session: Session) -> Callable[..., Post]:
    """Publish a story as ``author`` through the post service."""

    def _make_post(author: Profile, **fields: Any) -> Post:
        payload: dict[str, Any] = {"content": "She taught me to read.", **fields}
        if "recipient_id" not in payload and "recipient_name" not in payload:
            payload["recipient_name"] = "Ms. Alvarez"
        return post_service.create_post(db_session, author, PostCreate(**payload))

    return _make_post


@pytest.fixture()
def test_user(make_user: Callable[..., Profile]) -> Profile:
    return make_user("alice@example.com", "Alice", "Walker")


@pytest.fixture()
def other_user(make_user: Callable[..., Profile]) -> Profile:
    return make_user("bob@example.com", "Bob", "Stone")


@pytest.fixture()
def third_user(make_user: Callable[..., Profile]) -> Profile:
    return make_user("carol@example.com", "Carol", "Nguyen")


@pytest.fixture()
def auth_token(test_user: Profile) -> dict[str, str]:
    return auth_headers(test_user)


@pytest.fixture()
def other_auth_token(other_user: Profile) -> dict[str, str]:
    return auth_headers(other_user)


@pytest.fixture()
def third_auth_token(third_user: Profile) -> dict[str, str]:
    return auth_headers(third_user)


@pytest.fixture()
def test_post(make_post: Callable[..., Post], test_user: Profile) -> Post:
    """A public story by ``test_user`` about someone without an account."""
    return make_post(test_user, privacy_level=PrivacyLevel.PUBLIC)


@pytest.fixture()
def tagged_post(
    make_post: Callable[..., Post], test_user: Profile, other_user: Profile
) -> Post:
    """A public story by ``test_user`` tagging ``other_user``."""
    return make_post(test_user, recipient_id=other_user.id)
