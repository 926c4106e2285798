from dataclasses import dataclass

from marshmallow import Schema, fields, validate, post_load, EXCLUDE


@dataclass(frozen=True)
class NoteEdit:
    """Soumission décodée: les trois valeurs sont garanties être des chaînes."""
    note_id: str
    title: str
    content: str


class NoteEditIn(Schema):
    """Décodage de la frontière HTTP.

    Vérifie uniquement la forme (présence, type chaîne). Les règles métier
    (longueurs) sont appliquées ensuite par ``validate_note_edit`` et
    n'échouent jamais ici.
    """

    class Meta:
        unknown = EXCLUDE

    note_id = fields.String(required=True, validate=validate.Length(min=1))
    title = fields.String(required=True)
    content = fields.String(required=True)

    @post_load
    def make_edit(self, data, **kwargs):
        return NoteEdit(**data)


class NoteOut(Schema):
    # uniquement ce dont le formulaire a besoin
    title = fields.String(required=True)
    content = fields.String(required=True)


class ValidationReportOut(Schema):
    form_errors = fields.List(fields.String(), data_key="formErrors")
    field_errors = fields.Dict(
        keys=fields.String(),
        values=fields.List(fields.String()),
        data_key="fieldErrors",
    )
