# backend/transactions/store.py

from __future__ import annotations

import logging
from decimal import Decimal
from typing import Iterable, List

from sqlalchemy import extract, func

from errors import NotFound
from models.transaction_model import Transaction, TransactionTag, from_cents, utcnow

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = ("amount", "description", "category", "tags")

# largest id a BIGINT primary key can hold
MAX_ROW_ID = 2**63 - 1


class TransactionStore:
    """
    Owner-scoped CRUD and aggregate queries over transactions.

    Every lookup filters on (id, owner_id) together; a transaction that
    belongs to someone else is reported exactly like one that does not
    exist.
    """

    def __init__(self, session):
        self._session = session

    def _owned(self, owner_id):
        return self._session.query(Transaction).filter(Transaction.user_id == owner_id)

    def create(self, owner_id, amount, description, category, tags: Iterable[str] = ()) -> Transaction:
        txn = Transaction(
            user_id=owner_id,
            amount=amount,
            description=description,
            category=category,
            tags=list(tags or ()),
        )
        self._session.add(txn)
        self._session.commit()
        logger.info("Created transaction id=%s for user id=%s", txn.id, owner_id)
        return txn

    def list(self, owner_id, page: int = 1, page_size: int = 10) -> List[Transaction]:
        offset = (page - 1) * page_size
        return (
            self._owned(owner_id)
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .limit(page_size)
            .offset(offset)
            .all()
        )

    def get(self, txn_id, owner_id) -> Transaction:
        if txn_id > MAX_ROW_ID:
            raise NotFound("Transaction not found")
        txn = self._owned(owner_id).filter(Transaction.id == txn_id).first()
        if txn is None:
            raise NotFound("Transaction not found")
        return txn

    def update(self, txn_id, owner_id, fields: dict) -> Transaction:
        txn = self.get(txn_id, owner_id)

        for name in UPDATABLE_FIELDS:
            if fields.get(name) is not None:
                setattr(txn, name, fields[name])
        txn.updated_at = utcnow()

        self._session.commit()
        logger.info("Updated transaction id=%s for user id=%s", txn.id, owner_id)
        return txn

    def delete(self, txn_id, owner_id) -> dict:
        txn = self.get(txn_id, owner_id)
        snapshot = txn.to_dict()

        self._session.delete(txn)
        self._session.commit()
        logger.info("Deleted transaction id=%s for user id=%s", txn_id, owner_id)
        return snapshot

    # ------------------------------------------------------------------
    # Aggregates
    # ------------------------------------------------------------------

    def aggregate_by_category(self, owner_id) -> List[dict]:
        total = func.sum(Transaction.amount_cents)
        rows = (
            self._session.query(
                Transaction.category,
                total.label("total_cents"),
                func.count(Transaction.id).label("transaction_count"),
            )
            .filter(Transaction.user_id == owner_id)
            .group_by(Transaction.category)
            .order_by(total.desc(), Transaction.category)
            .all()
        )
        return [
            {
                "category": r.category,
                "total_amount": float(from_cents(r.total_cents)),
                "transaction_count": int(r.transaction_count),
            }
            for r in rows
        ]

    def aggregate_by_tag(self, owner_id) -> List[dict]:
        """
        A transaction with several tags adds its full amount to each of
        them; amounts are not split between tags.
        """
        total = func.sum(Transaction.amount_cents)
        rows = (
            self._session.query(
                TransactionTag.name.label("tag"),
                total.label("total_cents"),
                func.count(Transaction.id).label("transaction_count"),
            )
            .join(Transaction, TransactionTag.transaction_id == Transaction.id)
            .filter(Transaction.user_id == owner_id)
            .group_by(TransactionTag.name)
            .order_by(total.desc(), TransactionTag.name)
            .all()
        )
        return [
            {
                "tag": r.tag,
                "total_amount": float(from_cents(r.total_cents)),
                "transaction_count": int(r.transaction_count),
            }
            for r in rows
        ]

    def summary(self, owner_id, recent: int = 5) -> dict:
        total_cents = (
            self._session.query(func.coalesce(func.sum(Transaction.amount_cents), 0))
            .filter(Transaction.user_id == owner_id)
            .scalar()
        )
        total = from_cents(total_cents)

        months = (
            self._session.query(
                extract("year", Transaction.created_at),
                extract("month", Transaction.created_at),
            )
            .filter(Transaction.user_id == owner_id)
            .distinct()
            .all()
        )
        monthly_average = (total / len(months)).quantize(Decimal("0.01")) if months else Decimal("0.00")

        count = func.count(Transaction.id)
        top = (
            self._session.query(Transaction.category)
            .filter(Transaction.user_id == owner_id)
            .group_by(Transaction.category)
            .order_by(count.desc(), Transaction.category)
            .first()
        )

        return {
            "total_amount": float(total),
            "monthly_average": float(monthly_average),
            "top_category": top.category if top else None,
            "recent_transactions": [t.to_dict() for t in self.list(owner_id, 1, recent)],
        }
