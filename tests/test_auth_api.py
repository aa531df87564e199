from datetime import timedelta
from sqlalchemy import func, select
from dinehub.core.config import settings
from dinehub.core.security import create_session, utcnow
from dinehub.models.restaurant import Restaurant
from dinehub.models.session import UserSession


class TestRegister:
    def test_register_returns_user_and_logs_in(self, client):
        resp = client.post("/api/auth/register", json={"username": "alice", "password": "pw1"})
        assert resp.status_code == 201
        body = resp.json()
        assert body["username"] == "alice"
        assert "password" not in body and "hashedPassword" not in body
        assert settings.SESSION_COOKIE_NAME in resp.cookies
        assert client.get("/api/auth/me").json()["id"] == body["id"]

    def test_duplicate_username(self, client, owner):
        resp = client.post("/api/auth/register", json={"username": "alice", "password": "other"})
        assert resp.status_code == 400
        assert resp.json()["message"] == "Username already exists"

    def test_missing_password_names_field(self, client):
        resp = client.post("/api/auth/register", json={"username": "bob"})
        assert resp.status_code == 400
        assert resp.json()["field"] == "password"


class TestLogin:
    def test_login_sets_session(self, client, owner):
        client.cookies.clear()
        resp = client.post("/api/auth/login", json={"username": "alice", "password": "pw1"})
        assert resp.status_code == 200
        assert resp.json()["username"] == "alice"
        assert client.get("/api/auth/me").json()["username"] == "alice"

    def test_wrong_password(self, client, owner):
        client.cookies.clear()
        resp = client.post("/api/auth/login", json={"username": "alice", "password": "nope"})
        assert resp.status_code == 401
        assert resp.json()["message"] == "Invalid credentials"

    def test_unknown_user(self, client):
        resp = client.post("/api/auth/login", json={"username": "ghost", "password": "pw"})
        assert resp.status_code == 401


class TestSession:
    def test_me_without_session_is_null(self, client):
        resp = client.get("/api/auth/me")
        assert resp.status_code == 200
        assert resp.json() is None

    def test_logout_revokes_server_side_session(self, client, owner, run):
        token = client.cookies.get(settings.SESSION_COOKIE_NAME)
        assert client.post("/api/auth/logout").status_code == 200
        assert client.get("/api/auth/me").json() is None

        # Replaying the old cookie does not bring the session back
        client.cookies.set(settings.SESSION_COOKIE_NAME, token)
        assert client.get("/api/auth/me").json() is None
        assert client.get("/api/restaurants").status_code == 401

    def test_session_expires_absolutely(self, client, owner, run):
        client.cookies.clear()
        issued = utcnow() - timedelta(hours=settings.SESSION_TTL_HOURS, minutes=1)
        session = run(create_session, owner["id"], now=issued)
        client.cookies.set(settings.SESSION_COOKIE_NAME, session.token)

        assert client.get("/api/restaurants").status_code == 401
        assert client.get("/api/auth/me").json() is None

        async def count_sessions(db):
            return await db.scalar(
                select(func.count()).select_from(UserSession).where(UserSession.token == session.token)
            )
        assert run(count_sessions) == 0

    def test_session_within_window_is_valid(self, client, owner, run):
        client.cookies.clear()
        issued = utcnow() - timedelta(hours=settings.SESSION_TTL_HOURS - 1)
        session = run(create_session, owner["id"], now=issued)
        client.cookies.set(settings.SESSION_COOKIE_NAME, session.token)
        assert client.get("/api/auth/me").json()["username"] == "alice"

    def test_session_timestamps_are_naive_utc(self, client, owner, run):
        session = run(create_session, owner["id"])
        assert session.created_at.tzinfo is None
        assert abs(session.created_at - utcnow()) < timedelta(minutes=1)

    def test_cookie_max_age_matches_ttl(self, client):
        resp = client.post("/api/auth/register", json={"username": "carol", "password": "pw"})
        cookie = resp.headers["set-cookie"]
        assert f"Max-Age={settings.SESSION_TTL_HOURS * 3600}" in cookie
        assert "HttpOnly" in cookie


def test_unauthenticated_create_restaurant_writes_nothing(client, run):
    resp = client.post("/api/restaurants", json={"name": "Bistro", "slug": "bistro"})
    assert resp.status_code == 401
    assert resp.json()["message"] == "Unauthorized"

    async def count(db):
        return await db.scalar(select(func.count()).select_from(Restaurant))
    assert run(count) == 0
