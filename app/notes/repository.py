import logging
from typing import Optional

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError

from app.extensions import db
from app.common.errors import PersistenceFailure
from app.notes.models import Note

log = logging.getLogger("app.notes")


class NoteRepository:
    """Accès aux notes via la session Flask-SQLAlchemy."""

    def __init__(self, session=None):
        self.session = session or db.session

    def find_note_by_id(self, note_id: str) -> Optional[Note]:
        return self.session.query(Note).filter(Note.id == note_id).first()

    def update_note(self, note_id: str, title: str, content: str) -> None:
        stmt = update(Note).where(Note.id == note_id).values(title=title, content=content)
        try:
            updated = self.session.execute(stmt).rowcount
            if updated:
                self.session.commit()
            else:
                self.session.rollback()
        except SQLAlchemyError as e:
            self.session.rollback()
            log.error("note_update_failed", extra={"note_id": note_id, "error": str(e)})
            raise PersistenceFailure(details={"note_id": note_id}) from e

        if not updated:
            # la note a disparu entre la lecture et l'écriture
            log.error("note_update_failed", extra={"note_id": note_id, "error": "no_row"})
            raise PersistenceFailure(
                "Could not save the note: it no longer exists.",
                details={"note_id": note_id},
            )
