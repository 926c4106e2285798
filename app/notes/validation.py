from functools import reduce

from marshmallow import ValidationError, validate

from app.notes.outcomes import ValidationReport
from app.notes.schemas import NoteEdit

TITLE_MAX_LENGTH = 100
CONTENT_MAX_LENGTH = 10000

# Ordre significatif: un champ qui viole deux règles garde cet ordre
NOTE_RULES = (
    ("title", validate.Length(min=1, error="Title is required")),
    ("title", validate.Length(max=TITLE_MAX_LENGTH, error="Title must be at most {max} characters long")),
    ("content", validate.Length(min=1, error="Content is required")),
    ("content", validate.Length(max=CONTENT_MAX_LENGTH, error="Content must be at most {max} characters long")),
)


def _check(values):
    def step(report: ValidationReport, rule) -> ValidationReport:
        field_name, validator = rule
        try:
            validator(values[field_name])
        except ValidationError as err:
            for message in err.messages:
                report = report.with_field_error(field_name, message)
        return report
    return step


def validate_note_edit(edit: NoteEdit, rules=NOTE_RULES) -> ValidationReport:
    """Applique toutes les règles, sans s'arrêter à la première erreur."""
    values = {"title": edit.title, "content": edit.content}
    return reduce(_check(values), rules, ValidationReport.empty())
