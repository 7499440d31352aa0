from flask import Blueprint, request, jsonify

from adulting.db import db
from adulting.schemas import load_or_400
from adulting.schemas.user_schema import UserAuthSchema, UserRegisterSchema
from adulting.services import auth_service


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/token", methods=["POST"])
def token():
    data = load_or_400(UserAuthSchema(), request.get_json(silent=True))

    user = auth_service.authenticate(db.session, data["username"], data["password"])
    return jsonify({"token": auth_service.create_token(user)}), 200


@auth_bp.route("/register", methods=["POST"])
def register():
    data = load_or_400(UserRegisterSchema(), request.get_json(silent=True))

    user = auth_service.register(db.session, **data)
    return jsonify({"token": auth_service.create_token(user)}), 201
