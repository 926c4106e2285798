import logging

from marshmallow import ValidationError

from app.common.errors import MalformedRequest, NoteNotFound
from app.notes.outcomes import Failure, MutationOutcome, Success
from app.notes.repository import NoteRepository
from app.notes.schemas import NoteEditIn, NoteOut
from app.notes.validation import validate_note_edit

log = logging.getLogger("app.notes")

note_edit_in = NoteEditIn()
note_out = NoteOut()


def note_path(username: str, note_id: str) -> str:
    return f"/users/{username}/notes/{note_id}"


class NoteEditor:
    """Lecture et modification d'une note (titre, contenu).

    ``load`` alimente le formulaire d'édition; ``submit`` décode, valide et
    n'écrit qu'après une validation complète. Aucun état n'est conservé
    entre deux appels.
    """

    def __init__(self, repository=None):
        self.repository = repository or NoteRepository()

    def load(self, note_id) -> dict:
        if not note_id:
            raise MalformedRequest("Missing note identifier.", {"note_id": ["Missing data for required field."]})
        note = self.repository.find_note_by_id(note_id)
        if note is None:
            raise NoteNotFound(note_id)
        return note_out.dump(note)

    def submit(self, note_id, title, content) -> MutationOutcome:
        try:
            edit = note_edit_in.load({"note_id": note_id, "title": title, "content": content})
        except ValidationError as e:
            raise MalformedRequest(details=e.messages) from e

        note = self.repository.find_note_by_id(edit.note_id)
        if note is None:
            raise NoteNotFound(edit.note_id)

        report = validate_note_edit(edit)
        if report.has_errors:
            log.info("note_edit_rejected", extra={"note_id": edit.note_id, "errors": dict(report.field_errors)})
            return Failure(report)

        owner_username = note.owner.username
        self.repository.update_note(edit.note_id, title=edit.title, content=edit.content)
        log.info("note_updated", extra={"note_id": edit.note_id})
        return Success(note_path(owner_username, edit.note_id))
