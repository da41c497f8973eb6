"""Shared fixtures: a throwaway SQLite database and an API client."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(__file__).parent / "test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["SUGGESTION_POPULAR_MIN_FOLLOWERS"] = "0"

pytest.importorskip("fastapi")
from fastapi.testclient import TestClient  # noqa: E402

from app.config import reset_settings_cache  # noqa: E402

reset_settings_cache()

from app.infrastructure import database  # noqa: E402
from app.infrastructure.security import create_identity_assertion  # noqa: E402


@pytest.fixture(autouse=True)
def setup_database() -> Iterator[None]:
    """Prepare a fresh schema for every test."""

    database.Base.metadata.drop_all(bind=database.engine, checkfirst=True)
    database.initialize_database()
    yield
    database.engine.dispose()


@pytest.fixture()
def db_session() -> Iterator:
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def client() -> Iterator[TestClient]:
    from main import create_app

    app = create_app()
    with TestClient(app) as test_client:
        yield test_client


class SignedInUser:
    """A user signed in through the API, with headers ready to send."""

    def __init__(self, payload: dict) -> None:
        self.token: str = payload["accessToken"]
        self.profile: dict = payload["user"]
        self.id: int = payload["user"]["id"]
        self.username: str = payload["user"]["username"]
        self.headers = {"Authorization": f"Bearer {self.token}"}


@pytest.fixture()
def sign_in(client: TestClient) -> Callable[..., SignedInUser]:
    """Return a helper that signs a user in through ``POST /auth/session``."""

    def _sign_in(
        name: str,
        *,
        email: str | None = None,
        account_id: str | None = None,
        provider: str = "google",
        picture: str | None = None,
    ) -> SignedInUser:
        assertion = create_identity_assertion(
            provider=provider,
            provider_account_id=account_id or f"{name.lower()}-account",
            email=email if email is not None else f"{name.lower()}@example.com",
            name=name,
            picture=picture,
        )
        response = client.post("/auth/session", json={"assertion": assertion})
        assert response.status_code == 200, response.text
        return SignedInUser(response.json())

    return _sign_in
