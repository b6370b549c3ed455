import sqlite3

import pytest
from fastapi.testclient import TestClient

from signup.app_factory import create_app
from signup.core.config import Settings
from signup.deps import get_verifier


class StubVerifier:
    def __init__(self, result: bool = True):
        self.result = result
        self.tokens: list[str] = []

    async def verify(self, token: str) -> bool:
        self.tokens.append(token)
        return self.result


@pytest.fixture
def db_path(tmp_path):
    return tmp_path / "users.db"


@pytest.fixture
def settings(db_path):
    return Settings(
        database_url=f"sqlite+aiosqlite:///{db_path}",
        recaptcha_secret_key="server-secret",
        recaptcha_site_key="site-key-123",
        db_use_procedure=False,
        db_create_tables=True,
    )


@pytest.fixture
def verifier():
    return StubVerifier()


@pytest.fixture
def app(settings, verifier):
    app = create_app(settings)
    app.dependency_overrides[get_verifier] = lambda: verifier
    return app


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def rows(db_path):
    def _rows():
        with sqlite3.connect(db_path) as conn:
            conn.row_factory = sqlite3.Row
            return [dict(r) for r in conn.execute("SELECT * FROM users ORDER BY ID")]

    return _rows


@pytest.fixture
def payload():
    return {
        "name": "player1",
        "email": "p1@example.com",
        "password": "secret1",
        "confirmPassword": "secret1",
        "recaptchaToken": "valid",
    }
