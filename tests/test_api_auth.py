from conftest import register


def test_register_sets_cookie_and_returns_user(app):
    c = app.test_client()
    resp = register(c, "harry")

    assert resp.status_code == 201
    body = resp.get_json()
    assert body["username"] == "harry"
    assert "password" not in body
    assert "access_token_cookie" in resp.headers.get("Set-Cookie", "")

    me = c.get("/api/user")
    assert me.status_code == 200
    assert me.get_json()["id"] == body["id"]


def test_duplicate_username_is_rejected(app, client):
    resp = register(app.test_client(), "alice")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Username already exists"}


def test_register_validates_lengths(app):
    c = app.test_client()
    short_name = register(c, "al")
    short_pw = register(c, "harry", password="123")

    assert short_name.status_code == 400
    assert "username" in short_name.get_json()["message"]
    assert short_pw.status_code == 400
    assert "password" in short_pw.get_json()["message"]


def test_login_and_logout(app, client):
    c = app.test_client()
    bad = c.post("/api/login", json={"username": "alice", "password": "wrong-password"})
    assert bad.status_code == 401
    assert bad.get_json() == {"message": "Invalid username or password"}

    ok = c.post("/api/login", json={"username": "alice", "password": "secret123"})
    assert ok.status_code == 200
    assert c.get("/api/user").status_code == 200

    assert c.post("/api/logout").status_code == 200
    assert c.get("/api/user").status_code == 401


def test_api_requires_cookie(app):
    resp = app.test_client().get("/api/settings")
    assert resp.status_code == 401
    assert "message" in resp.get_json()


def test_malformed_body_is_a_validation_error(app):
    resp = app.test_client().post("/api/login", data="not json", content_type="application/json")
    assert resp.status_code == 400
    assert resp.get_json() == {"message": "Validation error: request body must be valid JSON"}


def test_unexpected_error_is_logged_as_500(client, storage, monkeypatch, caplog):
    def broken(user_id):
        raise RuntimeError("settings table is gone")

    monkeypatch.setattr(storage, "get_settings", broken)

    with caplog.at_level("ERROR"):
        resp = client.get("/api/settings")

    assert resp.status_code == 500
    assert resp.get_json() == {"message": "Internal server error"}
    errors = [r for r in caplog.records if r.levelname == "ERROR"]
    assert any("settings table is gone" in r.getMessage() for r in errors)
    assert errors[-1].exc_info is not None
