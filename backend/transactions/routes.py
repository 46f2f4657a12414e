# backend/transactions/routes.py

from flask import Blueprint, current_app
from flask_jwt_extended import current_user, jwt_required

from http_utils import json_body, positive_int_arg, success
from models import db

from .schemas import TransactionCreateSchema, TransactionUpdateSchema
from .store import TransactionStore


transactions_bp = Blueprint("transactions", __name__, url_prefix="/api/transactions")


@transactions_bp.before_request
@jwt_required()
def _require_token():
    # every route in this blueprint is protected
    pass


def _store():
    return TransactionStore(db.session)


@transactions_bp.route("", methods=["GET"])
def list_transactions():
    page = positive_int_arg("page", 1, maximum=current_app.config["MAX_PAGE"])
    limit = positive_int_arg(
        "limit",
        current_app.config["DEFAULT_PAGE_SIZE"],
        maximum=current_app.config["MAX_PAGE_SIZE"],
    )

    transactions = _store().list(current_user.id, page, limit)

    return success(
        {
            "transactions": [t.to_dict() for t in transactions],
            "page": page,
            "limit": limit,
        }
    )


@transactions_bp.route("", methods=["POST"])
def create_transaction():
    data = TransactionCreateSchema(**json_body())

    txn = _store().create(
        current_user.id,
        amount=data.amount,
        description=data.description,
        category=data.category,
        tags=data.tags,
    )

    return success({"transaction": txn.to_dict()}, 201)


@transactions_bp.route("/stats", methods=["GET"])
def transaction_stats():
    store = _store()
    return success(
        {
            "categoryStats": store.aggregate_by_category(current_user.id),
            "tagStats": store.aggregate_by_tag(current_user.id),
        }
    )


@transactions_bp.route("/summary", methods=["GET"])
def transaction_summary():
    """
    Dashboard numbers: total, average per active month, most used
    category and the latest few transactions.
    """
    return success(_store().summary(current_user.id))


@transactions_bp.route("/<int:txn_id>", methods=["GET"])
def get_transaction(txn_id):
    txn = _store().get(txn_id, current_user.id)
    return success({"transaction": txn.to_dict()})


@transactions_bp.route("/<int:txn_id>", methods=["PUT", "PATCH"])
def update_transaction(txn_id):
    data = TransactionUpdateSchema(**json_body())

    txn = _store().update(txn_id, current_user.id, data.changes())

    return success({"transaction": txn.to_dict()})


@transactions_bp.route("/<int:txn_id>", methods=["DELETE"])
def delete_transaction(txn_id):
    deleted = _store().delete(txn_id, current_user.id)
    return success({"transaction": deleted}, message="Transaction deleted successfully")
