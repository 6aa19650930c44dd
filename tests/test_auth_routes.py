from datetime import datetime, timedelta

from africash.extensions import db
from africash.models.user_session import UserSession
from tests.helpers import register

COOKIE = "africash.sid"


def test_register_creates_empty_wallet_and_logs_in(client):
    r = register(client, referralCode="REF123")
    assert r.status_code == 201
    body = r.get_json()
    assert body["email"] == "alice@x.com"
    assert body["balance"] == "0.00"
    assert body["isActivated"] is False
    assert body["isAdmin"] is False
    assert body["referralCode"] == "REF123"
    assert "password" not in body and "password_hash" not in body

    assert "HttpOnly" in r.headers["Set-Cookie"]
    me = client.get("/api/user")
    assert me.status_code == 200
    assert me.get_json()["id"] == body["id"]


def test_register_password_is_hashed(app, client):
    register(client)
    with app.app_context():
        record = UserSession.query.one()
        assert record.user.password_hash != "pw123456"
        assert record.user.password_hash.startswith("$2")


def test_register_duplicate_email(app):
    assert register(app.test_client()).status_code == 201

    r = register(app.test_client(), email="ALICE@x.com")
    assert r.status_code == 400
    assert r.get_json() == {"message": "Email already exists", "field": "email"}


def test_register_reports_first_invalid_field(client):
    r = client.post("/api/register", json={})
    assert r.status_code == 400
    assert r.get_json()["field"] == "name"

    r = register(client, email="not-an-email")
    assert r.get_json()["field"] == "email"

    r = register(client, password="123")
    assert r.get_json()["field"] == "password"

    r = client.post("/api/register", data="garbage", content_type="text/plain")
    assert r.status_code == 400


def test_register_rejects_password_longer_than_bcrypt_accepts(client):
    r = register(client, password="a" * 100)
    assert r.status_code == 400
    assert r.get_json()["field"] == "password"

    # 36 two-byte characters fit, 37 do not
    assert register(client, email="bob@x.com", password="é" * 37).status_code == 400
    assert register(client, email="bob@x.com", password="é" * 36).status_code == 201


def test_login_with_overlong_password_is_a_plain_failure(app):
    register(app.test_client())
    client = app.test_client()

    for email in ("alice@x.com", "nobody@x.com"):
        r = client.post("/api/login", json={"email": email, "password": "a" * 100})
        assert r.status_code == 401
        assert r.get_json() == {"message": "Invalid email or password"}


def test_login_and_logout(app):
    register(app.test_client())

    client = app.test_client()
    assert client.get("/api/user").status_code == 401

    r = client.post("/api/login", json={"email": "alice@x.com", "password": "pw123456"})
    assert r.status_code == 200
    assert r.get_json()["email"] == "alice@x.com"
    assert client.get("/api/user").status_code == 200

    r = client.post("/api/logout")
    assert r.status_code == 200
    assert r.get_json() == {"message": "Logged out successfully"}
    assert client.get("/api/user").status_code == 401

    with app.app_context():
        # only the registering client's session is left
        assert UserSession.query.count() == 1


def test_logout_without_session_is_a_noop(client):
    r = client.post("/api/logout")
    assert r.status_code == 200


def test_login_failures_are_indistinguishable(app):
    register(app.test_client())
    client = app.test_client()

    wrong_password = client.post("/api/login", json={"email": "alice@x.com", "password": "nope1234"})
    unknown_email = client.post("/api/login", json={"email": "bob@x.com", "password": "pw123456"})

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.get_json() == unknown_email.get_json() == {"message": "Invalid email or password"}
    assert client.get("/api/user").status_code == 401


def test_login_missing_field(client):
    r = client.post("/api/login", json={"email": "alice@x.com"})
    assert r.status_code == 400
    assert r.get_json()["field"] == "password"


def test_guard_rejects_anonymous_requests(client):
    for method, path in [
        ("get", "/api/user"),
        ("post", "/api/activate"),
        ("post", "/api/earn"),
        ("post", "/api/withdraw"),
        ("get", "/api/transactions"),
        ("get", "/api/withdrawals"),
    ]:
        r = getattr(client, method)(path, json={})
        assert r.status_code == 401, path
        assert r.get_json() == {"message": "Unauthorized"}


def test_forged_cookie_is_rejected(client):
    client.set_cookie(COOKIE, "forged-token")
    assert client.get("/api/user").status_code == 401


def test_destroyed_session_is_rejected(app, client):
    register(client)
    with app.app_context():
        UserSession.query.delete()
        db.session.commit()

    assert client.get("/api/user").status_code == 401


def test_expired_session_is_destroyed(app, client):
    register(client)
    with app.app_context():
        record = UserSession.query.one()
        record.expires_at = datetime.utcnow() - timedelta(seconds=1)
        db.session.commit()

    assert client.get("/api/user").status_code == 401
    with app.app_context():
        assert UserSession.query.count() == 0


def test_activity_extends_session(app, client):
    register(client)
    with app.app_context():
        record = UserSession.query.one()
        record.expires_at = datetime.utcnow() + timedelta(minutes=5)
        db.session.commit()

    assert client.get("/api/user").status_code == 200
    with app.app_context():
        assert UserSession.query.one().expires_at > datetime.utcnow() + timedelta(days=6)
