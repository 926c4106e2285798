# tests/test_rate_limit.py
import pytest

from app import create_app
from app.config import TestConfig
from app.extensions import db, limiter
from app.notes.models import Note
from app.users.models import User


class RateLimitedConfig(TestConfig):
    RATELIMIT_ENABLED = True
    RATELIMIT_NOTES = "1/minute"


@pytest.fixture()
def limited_app(monkeypatch):
    # le limiter est partagé: on restaure son état pour les autres tests
    monkeypatch.setattr(limiter, "enabled", limiter.enabled)
    app = create_app(RateLimitedConfig)
    with app.app_context():
        db.create_all()
        db.session.add_all([
            User(id="u-kim", username="kim", name="Kim"),
            Note(id="abc", title="Old title", content="Old content", owner_id="u-kim"),
        ])
        db.session.commit()
        yield app
        db.session.remove()
        db.drop_all()


def test_notes_blueprint_is_rate_limited(limited_app):
    client = limited_app.test_client()
    headers = {"Accept": "application/json"}

    r = client.get("/users/kim/notes/abc/edit", headers=headers)
    assert r.status_code == 200

    r = client.get("/users/kim/notes/abc/edit", headers=headers)
    assert r.status_code == 429
    assert r.get_json()["error"]["code"] == "rate_limited"


def test_profile_is_not_rate_limited(limited_app):
    client = limited_app.test_client()
    for _ in range(3):
        assert client.get("/users/kim").status_code == 200
