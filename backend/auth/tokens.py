# backend/auth/tokens.py

"""
Signing and verification of bearer tokens.

Tokens are Flask-JWT-Extended access tokens whose subject is the user id
(as a string); lifetime comes from JWT_ACCESS_TOKEN_EXPIRES.
"""

from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt import ExpiredSignatureError, InvalidTokenError

from errors import Unauthorized


def issue_token(user_id) -> str:
    return create_access_token(identity=str(user_id))


def verify_token(token: str) -> int:
    """
    Check signature and expiry and return the user id.
    Does not check that the user still exists.
    """
    try:
        claims = decode_token(token)
    except ExpiredSignatureError:
        raise Unauthorized("Token has expired")
    except (InvalidTokenError, JWTExtendedException, ValueError, KeyError):
        raise Unauthorized("Invalid token")

    try:
        return int(claims["sub"])
    except (KeyError, TypeError, ValueError):
        raise Unauthorized("Invalid token")
