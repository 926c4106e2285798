# tests/conftest.py
import os, sys
import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
os.environ["APP_ENV"] = "test"
os.environ.setdefault("TEST_DATABASE_URL", "sqlite:///:memory:")

from app import create_app
from app.extensions import db
from app.notes.models import Note
from app.users.models import User

@pytest.fixture(scope="session")
def app():
    app = create_app()
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()

@pytest.fixture(autouse=True)
def _tables(app):
    # tables propres pour chaque test
    with app.app_context():
        db.drop_all()
        db.create_all()
        yield
        db.session.remove()

@pytest.fixture()
def client(app):
    return app.test_client()

@pytest.fixture()
def seed(app):
    """kim possède la note "abc"."""
    kim = User(id="u-kim", username="kim", name="Kim")
    note = Note(id="abc", title="Old title", content="Old content", owner_id=kim.id)
    db.session.add_all([kim, note])
    db.session.commit()
    return {"user_id": "u-kim", "note_id": "abc"}
