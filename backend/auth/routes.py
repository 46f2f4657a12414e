# backend/auth/routes.py

from flask import Blueprint, current_app
from flask_jwt_extended import current_user, jwt_required

from auth.schemas import RegisterSchema, LoginSchema
from auth.services import AuthService
from auth.tokens import issue_token
from http_utils import json_body, success
from models import db

auth_bp = Blueprint("auth", __name__, url_prefix="/api/auth")


def _service():
    return AuthService(db.session, current_app.config["BCRYPT_LOG_ROUNDS"])


@auth_bp.route("/register", methods=["POST"])
def register():
    data = RegisterSchema(**json_body())

    user = _service().register(data.email, data.password, data.name)
    token = issue_token(user.id)

    return success({"user": user.to_dict(), "token": token}, 201)


@auth_bp.route("/login", methods=["POST"])
def login():
    data = LoginSchema(**json_body())

    token, user = _service().login(data.email, data.password)

    return success({"user": user.to_dict(), "token": token})


@auth_bp.route("/profile", methods=["GET"])
@jwt_required()
def profile():
    return success({"user": current_user.to_dict()})
