# tests/test_app.py
JSON = {"Accept": "application/json"}


def test_healthz(client):
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.get_json()["db"] == "up"
    assert r.get_json()["env"] == "test"


def test_readyz_without_redis(client):
    r = client.get("/readyz")
    assert r.status_code == 200
    assert r.get_json() == {"db": "up", "redis": "n/a", "status": "ok"}


def test_security_headers_and_request_id(client):
    r = client.get("/healthz", headers={"X-Request-Id": "req-42"})
    assert r.headers["X-Request-Id"] == "req-42"
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["X-Content-Type-Options"] == "nosniff"


def test_profile_shows_name(client, seed):
    r = client.get("/users/kim", headers=JSON)
    assert r.status_code == 200
    assert r.get_json() == {"user": {"username": "kim", "name": "Kim"}}


def test_profile_unknown_user_is_404(client):
    r = client.get("/users/nobody", headers=JSON)
    assert r.status_code == 404
    assert r.get_json()["error"]["details"] == {"username": "nobody"}


def test_unknown_route_uses_error_envelope(client):
    r = client.get("/nope", headers=JSON)
    assert r.status_code == 404
    assert r.get_json()["error"]["code"] == "http_error"
