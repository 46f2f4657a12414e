# backend/labels/routes.py

from flask import Blueprint
from flask_jwt_extended import current_user, jwt_required

from http_utils import json_body, success
from models import db

from .schemas import CategorySchema, TagSchema
from .services import LabelService


labels_bp = Blueprint("labels", __name__, url_prefix="/api")


@labels_bp.route("/categories", methods=["GET"])
@jwt_required()
def list_categories():
    rows = LabelService(db.session).list_categories(current_user.id)
    return success({"categories": [c.to_dict() for c in rows]})


@labels_bp.route("/categories", methods=["POST"])
@jwt_required()
def create_category():
    data = CategorySchema(**json_body())
    row = LabelService(db.session).create_category(current_user.id, data.name)
    return success({"category": row.to_dict()}, 201)


@labels_bp.route("/tags", methods=["GET"])
@jwt_required()
def list_tags():
    rows = LabelService(db.session).list_tags(current_user.id)
    return success({"tags": [t.to_dict() for t in rows]})


@labels_bp.route("/tags", methods=["POST"])
@jwt_required()
def create_tag():
    data = TagSchema(**json_body())
    row = LabelService(db.session).create_tag(current_user.id, data.name)
    return success({"tag": row.to_dict()}, 201)
