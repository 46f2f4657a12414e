# backend/labels/services.py

import logging

from sqlalchemy.exc import IntegrityError

from errors import Conflict
from models.label_models import Category, Tag

logger = logging.getLogger(__name__)


class LabelService:
    """User-scoped category and emotional-tag lookups."""

    def __init__(self, session):
        self._session = session

    def _list(self, model, owner_id):
        return self._session.query(model).filter_by(user_id=owner_id).order_by(model.name).all()

    def _create(self, model, owner_id, name, label):
        if self._session.query(model).filter_by(user_id=owner_id, name=name).first():
            raise Conflict(f"{label} '{name}' already exists")

        row = model(user_id=owner_id, name=name)
        self._session.add(row)
        try:
            self._session.commit()
        except IntegrityError:
            self._session.rollback()
            raise Conflict(f"{label} '{name}' already exists")

        logger.info("Created %s id=%s for user id=%s", label.lower(), row.id, owner_id)
        return row

    def list_categories(self, owner_id):
        return self._list(Category, owner_id)

    def list_tags(self, owner_id):
        return self._list(Tag, owner_id)

    def create_category(self, owner_id, name):
        return self._create(Category, owner_id, name, "Category")

    def create_tag(self, owner_id, name):
        return self._create(Tag, owner_id, name, "Tag")
