# backend/auth/guard.py

"""
Hooks the JWT manager into the user store.

Every @jwt_required() route gets its identity re-checked against the
users table, so a token outliving its user is rejected.
"""

import logging

from flask_jwt_extended import JWTManager

from auth.services import AuthService
from errors import error_response
from models import db

logger = logging.getLogger(__name__)


def init_jwt(app) -> JWTManager:
    jwt = JWTManager(app)

    @jwt.user_lookup_loader
    def load_user(_jwt_header, jwt_data):
        try:
            user_id = int(jwt_data["sub"])
        except (KeyError, TypeError, ValueError):
            return None
        return AuthService(db.session).get_user(user_id)

    @jwt.user_lookup_error_loader
    def user_gone(_jwt_header, jwt_data):
        logger.warning("Token for missing user sub=%s", jwt_data.get("sub"))
        return error_response("User no longer exists", 401)

    @jwt.unauthorized_loader
    def missing_token(_reason):
        return error_response("No token provided", 401)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        logger.warning("Rejected token: %s", reason)
        return error_response("Invalid token", 401)

    @jwt.expired_token_loader
    def expired_token(_jwt_header, _jwt_data):
        return error_response("Token has expired", 401)

    return jwt
