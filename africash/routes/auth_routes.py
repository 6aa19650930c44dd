from flask import Blueprint, request
from flask_login import current_user, login_required

from africash.schemas.user_schema import RegisterSchema, LoginSchema
from africash.services.auth_service import register_user, login_user, logout_user
from africash.utils.response_formatter import json_response
from africash.utils.validation import load_payload

bp = Blueprint("auth", __name__, url_prefix="/api")

register_schema = RegisterSchema()
login_schema = LoginSchema()


@bp.route("/register", methods=["POST"])
def register():
    data = load_payload(register_schema, request.get_json(silent=True))
    user = register_user(
        name=data["name"],
        email=data["email"],
        phone=data["phone"],
        password=data["password"],
        referral_code=data.get("referral_code"),
    )
    return json_response(user.to_dict(), status=201)


@bp.route("/login", methods=["POST"])
def login():
    data = load_payload(login_schema, request.get_json(silent=True))
    user = login_user(data["email"], data["password"])
    return json_response(user.to_dict())


@bp.route("/logout", methods=["POST"])
def logout():
    logout_user()
    return json_response({"message": "Logged out successfully"})


@bp.route("/user", methods=["GET"])
@login_required
def me():
    return json_response(current_user.to_dict())
