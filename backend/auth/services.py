# backend/auth/services.py

import logging

from sqlalchemy.exc import IntegrityError

from auth.passwords import check_password, hash_password
from auth.tokens import issue_token
from errors import EmailTaken, InvalidCredentials, InvalidInput
from models.label_models import Category, Tag, DEFAULT_CATEGORIES, DEFAULT_TAGS
from models.user_model import User

logger = logging.getLogger(__name__)

# compared against when the email is unknown, so both failures cost one bcrypt check
_DUMMY_HASHES = {}


def _dummy_hash(rounds):
    if rounds not in _DUMMY_HASHES:
        _DUMMY_HASHES[rounds] = hash_password("not-a-real-password", rounds)
    return _DUMMY_HASHES[rounds]


class AuthService:
    def __init__(self, session, bcrypt_rounds: int = 10):
        self._session = session
        self._rounds = bcrypt_rounds

    def get_user(self, user_id):
        return self._session.get(User, user_id)

    def get_by_email(self, email):
        return self._session.query(User).filter_by(email=email).first()

    def register(self, email, password, name) -> User:
        """
        Create the user and seed its default categories and emotional tags
        in one database transaction.
        """
        if not email or not password or not name:
            raise InvalidInput("Please provide email, password and name")

        if self.get_by_email(email):
            raise EmailTaken()

        user = User(email=email, name=name, password=hash_password(password, self._rounds))
        self._session.add(user)
        try:
            self._session.flush()
            self._session.add_all(Category(user_id=user.id, name=n) for n in DEFAULT_CATEGORIES)
            self._session.add_all(Tag(user_id=user.id, name=n) for n in DEFAULT_TAGS)
            self._session.commit()
        except IntegrityError:
            # lost a race against a concurrent registration
            self._session.rollback()
            raise EmailTaken()

        logger.info("Registered user id=%s", user.id)
        return user

    def login(self, email, password):
        user = self.get_by_email(email)

        # same error (and same bcrypt work) for unknown email and wrong password
        stored = user.password if user else _dummy_hash(self._rounds)
        if not check_password(password or "", stored) or not user:
            logger.warning("Failed login attempt")
            raise InvalidCredentials()

        logger.info("User id=%s logged in", user.id)
        return issue_token(user.id), user
