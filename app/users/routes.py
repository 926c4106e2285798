from flask import Blueprint, jsonify, render_template

from app.common.errors import UserNotFound
from app.common.utils import wants_json
from app.users.models import User
from app.users.schemas import UserOut

bp = Blueprint("users", __name__)
user_out = UserOut()

@bp.get("/<username>")
def profile(username):
    user = User.query.filter_by(username=username).first()
    if user is None:
        raise UserNotFound(username)
    data = user_out.dump(user)
    if wants_json():
        return jsonify({"user": data}), 200
    return render_template("users/profile.html", user=data)
