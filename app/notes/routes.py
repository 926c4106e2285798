from flask import Blueprint, current_app, request, jsonify, redirect, render_template

from app.common.utils import wants_json
from app.extensions import limiter
from app.notes.outcomes import Failure, Success
from app.notes.schemas import ValidationReportOut
from app.notes.service import NoteEditor
from app.notes.validation import TITLE_MAX_LENGTH, CONTENT_MAX_LENGTH

bp = Blueprint("notes", __name__)

report_out = ValidationReportOut()

# un seul compteur pour toutes les routes de notes
notes_limit = limiter.shared_limit(
    lambda: current_app.config.get("RATELIMIT_NOTES", "60/minute"), scope="notes"
)


def _submitted_fields():
    """Extrait title/content du corps (JSON ou formulaire).

    Un champ de formulaire répété devient une liste: il sera rejeté comme
    requête malformée au décodage.
    """
    if request.is_json:
        payload = request.get_json(silent=True)
        if not isinstance(payload, dict):
            payload = {}
    else:
        payload = {k: v[0] if len(v) == 1 else v for k, v in request.form.lists()}
    return payload.get("title"), payload.get("content")


def _render_edit(username, note_id, note, errors=None, status=200):
    return render_template(
        "notes/edit.html",
        username=username,
        note_id=note_id,
        note=note,
        errors=errors,
        title_max=TITLE_MAX_LENGTH,
        content_max=CONTENT_MAX_LENGTH,
    ), status


@bp.get("/<note_id>")
@notes_limit
def show_note(username, note_id):
    note = NoteEditor().load(note_id)
    if wants_json():
        return jsonify({"note": note}), 200
    return render_template("notes/show.html", username=username, note_id=note_id, note=note)


@bp.get("/<note_id>/edit")
@notes_limit
def edit_note(username, note_id):
    note = NoteEditor().load(note_id)
    if wants_json():
        return jsonify({"note": note}), 200
    return _render_edit(username, note_id, note)


@bp.post("/<note_id>/edit")
@notes_limit
def submit_note(username, note_id):
    title, content = _submitted_fields()
    outcome = NoteEditor().submit(note_id, title, content)

    if isinstance(outcome, Success):
        return redirect(outcome.redirect_path)
    if isinstance(outcome, Failure):
        errors = report_out.dump(outcome.report)
        if wants_json():
            return jsonify({"status": "error", "errors": errors}), 400
        # on réaffiche ce que l'utilisateur a saisi, pas la version stockée
        return _render_edit(username, note_id, {"title": title, "content": content}, errors, 400)
    raise TypeError(f"Unexpected mutation outcome: {outcome!r}")
