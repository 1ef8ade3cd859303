"""End-to-end tests for accounts, sessions and the assistant endpoints."""

import pytest
from fastapi.testclient import TestClient

from eduforum.application.usecase.auth import LogOutUseCase
from tests.harness import create_test_app

CREDENTIALS = {"name": "alice", "password": "correct horse"}


@pytest.fixture
def app():
    return create_test_app()


@pytest.fixture
def client(app) -> TestClient:
    """Create test client."""
    return TestClient(app)


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestSignUpAndLogIn:
    """Account creation and credential checks."""

    def test_signup_sets_session_cookie(self, client):
        # Act
        response = client.post("/api/student-signup", json=CREDENTIALS)

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert "session_id" in response.cookies
        me = client.get("/api/me")
        assert me.status_code == 200
        assert me.json() == {"name": "alice", "userType": "Student"}

    def test_duplicate_signup_rejected(self, client):
        client.post("/api/student-signup", json=CREDENTIALS)

        response = client.post("/api/student-signup", json=CREDENTIALS)

        assert response.status_code == 400
        assert response.json() == {"error": "Student already exists"}

    def test_same_name_allowed_in_other_role(self, client):
        client.post("/api/student-signup", json=CREDENTIALS)

        response = client.post("/api/admin-signup", json=CREDENTIALS)

        assert response.status_code == 200
        assert client.get("/api/check-user-role").json()["userType"] == "Admin"

    def test_login_with_correct_password(self, app):
        # Arrange
        TestClient(app).post("/api/student-signup", json=CREDENTIALS)
        fresh = TestClient(app)

        # Act
        response = fresh.post("/api/login-student", json=CREDENTIALS)

        # Assert
        assert response.status_code == 200
        assert fresh.get("/api/me").json()["name"] == "alice"

    def test_login_with_wrong_password(self, client):
        client.post("/api/student-signup", json=CREDENTIALS)

        response = client.post(
            "/api/login-student", json={"name": "alice", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json() == {"error": "Invalid credentials"}

    def test_login_in_wrong_role(self, client):
        client.post("/api/student-signup", json=CREDENTIALS)

        response = client.post("/api/login-admin", json=CREDENTIALS)

        assert response.status_code == 401

    def test_blank_name_rejected(self, client):
        response = client.post(
            "/api/student-signup", json={"name": " ", "password": "pw"}
        )

        assert response.status_code == 400


class TestSession:
    """Session lifecycle."""

    def test_me_without_session(self, client):
        response = client.get("/api/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Not authenticated"}

    def test_logout_ends_session(self, client):
        # Arrange
        client.post("/api/student-signup", json=CREDENTIALS)

        # Act
        response = client.post("/api/logout")

        # Assert
        assert response.status_code == 200
        assert response.json() == {"success": True}
        assert client.get("/api/me").status_code == 401

    def test_logout_without_session(self, client):
        response = client.post("/api/logout")

        assert response.status_code == 400
        assert response.json() == {"error": "No session to destroy"}

    def test_logout_unexpected_failure_is_hidden(self, client, monkeypatch):
        """A crash while logging out answers 500 in the error envelope."""
        # Arrange
        client.post("/api/student-signup", json=CREDENTIALS)

        async def failing_execute(self, request):
            raise RuntimeError("session store unavailable")

        monkeypatch.setattr(LogOutUseCase, "execute", failing_execute)

        # Act
        response = client.post("/api/logout")

        # Assert
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_unknown_cookie_is_anonymous(self, client):
        response = client.get("/api/me", headers={"Cookie": "session_id=forged-token"})

        assert response.status_code == 401

    def test_signup_replaces_previous_identity(self, client):
        client.post("/api/student-signup", json=CREDENTIALS)

        client.post("/api/admin-signup", json={"name": "root", "password": "pw"})

        assert client.get("/api/me").json() == {"name": "root", "userType": "Admin"}


class TestAssistantEndpoints:
    """Sentiment and moderation endpoints."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("I love this course", "Positive"),
            ("Worst lab ever", "Negative"),
            ("Slides should be shared", "Constructive"),
            ("Tuesday", "Constructive"),
        ],
    )
    def test_sentiment(self, client, text, expected):
        response = client.post("/api/sentiment", json={"text": text})

        assert response.status_code == 200
        assert response.json() == {"sentiment": expected}

    def test_sentiment_requires_text(self, client):
        response = client.post("/api/sentiment", json={"text": "  "})

        assert response.status_code == 400
        assert response.json() == {"error": "Text required"}

    def test_moderation(self, client):
        flagged = client.post("/api/moderation", json={"input": "you idiot"})
        clean = client.post("/api/moderation", json={"input": "nice lecture"})

        assert flagged.json() == {"flagged": True}
        assert clean.json() == {"flagged": False}

    def test_moderation_requires_input(self, client):
        response = client.post("/api/moderation", json={})

        assert response.status_code == 400
