import os
import re
from datetime import timedelta

from dotenv import load_dotenv

# load .env from backend folder
basedir = os.path.abspath(os.path.dirname(__file__))
load_dotenv(os.path.join(basedir, ".env"))


DEFAULT_TOKEN_LIFETIME = timedelta(hours=24)

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


def parse_duration(value, default=DEFAULT_TOKEN_LIFETIME):
    """
    Parse a token lifetime such as "3600", "30m", "24h" or "7d".
    Anything unparseable (or zero) falls back to `default`.
    """
    if value is None:
        return default
    match = _DURATION_RE.match(str(value))
    if not match:
        return default
    amount = int(match.group(1))
    if amount <= 0:
        return default
    unit = _DURATION_UNITS[match.group(2).lower()]
    return timedelta(**{unit: amount})


def _int_env(name, default):
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


class Config:

    # -------------------------
    # Flask core
    # -------------------------
    SECRET_KEY = os.getenv("SECRET_KEY", "fallback-secret")
    APP_ENV = os.getenv("APP_ENV", "development").lower()
    PORT = _int_env("PORT", 5000)
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # -------------------------
    # Database
    # -------------------------
    DB_USER = os.getenv("DB_USER")
    DB_PASSWORD = os.getenv("DB_PASSWORD")
    DB_HOST = os.getenv("DB_HOST")
    DB_PORT = os.getenv("DB_PORT")
    DB_NAME = os.getenv("DB_NAME")

    SQLALCHEMY_DATABASE_URI = os.getenv("SQLALCHEMY_DATABASE_URI")
    if not SQLALCHEMY_DATABASE_URI:
        if all([DB_USER, DB_PASSWORD, DB_HOST, DB_PORT, DB_NAME]):
            SQLALCHEMY_DATABASE_URI = (
                f"mysql+pymysql://{DB_USER}:{DB_PASSWORD}"
                f"@{DB_HOST}:{DB_PORT}/{DB_NAME}"
            )
        else:
            SQLALCHEMY_DATABASE_URI = f"sqlite:///{os.path.join(basedir, 'expense_tracker.db')}"

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # -------------------------
    # Auth
    # -------------------------
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_ACCESS_TOKEN_EXPIRES = parse_duration(os.getenv("JWT_EXPIRES_IN"))
    BCRYPT_LOG_ROUNDS = _int_env("BCRYPT_LOG_ROUNDS", 10)

    # -------------------------
    # Pagination
    # -------------------------
    DEFAULT_PAGE_SIZE = 10
    MAX_PAGE_SIZE = 100
    # keeps (page - 1) * limit well inside a BIGINT offset
    MAX_PAGE = 10_000_000


class TestingConfig(Config):
    TESTING = True
    APP_ENV = "testing"
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret-with-enough-length-for-hs256"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    BCRYPT_LOG_ROUNDS = 4
    LOG_LEVEL = "WARNING"
