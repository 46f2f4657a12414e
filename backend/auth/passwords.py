# backend/auth/passwords.py

import bcrypt

from errors import InvalidInput

# bcrypt only looks at the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


def _encode(password: str) -> bytes:
    raw = password.encode("utf-8")
    if len(raw) > MAX_PASSWORD_BYTES:
        raise InvalidInput(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
    return raw


def hash_password(password: str, rounds: int = 10) -> str:
    return bcrypt.hashpw(_encode(password), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def check_password(password: str, hashed_password: str) -> bool:
    try:
        raw = _encode(password)
    except InvalidInput:
        return False
    return bcrypt.checkpw(raw, hashed_password.encode("utf-8"))
