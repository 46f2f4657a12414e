from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP

from models import db

CENT = Decimal("0.01")


def utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


def to_cents(amount) -> int:
    """Decimal (or anything Decimal accepts) -> integer minor units, half-up."""
    return int((Decimal(str(amount)) / CENT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def from_cents(cents) -> Decimal:
    return (Decimal(int(cents or 0)) * CENT).quantize(CENT)


class Transaction(db.Model):
    """
    A single income/expense entry owned by one user.

    Amounts are kept as integer cents so that sums never drift; the
    `amount` property exposes them as a two-place Decimal.
    """

    __tablename__ = "transactions"

    id = db.Column(db.Integer, primary_key=True)

    # Ownership
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), index=True, nullable=False)

    # Core transaction data
    amount_cents = db.Column(db.BigInteger, nullable=False)
    description = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(100), nullable=False, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=utcnow, index=True)
    updated_at = db.Column(db.DateTime, nullable=True)

    tag_rows = db.relationship(
        "TransactionTag",
        backref="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionTag.id",
        lazy="selectin",
    )

    @property
    def amount(self) -> Decimal:
        return from_cents(self.amount_cents)

    @amount.setter
    def amount(self, value):
        self.amount_cents = to_cents(value)

    @property
    def tags(self) -> list:
        return [t.name for t in self.tag_rows]

    @tags.setter
    def tags(self, names):
        # replaces the whole set; rows for names that stay are reused
        existing = {t.name: t for t in self.tag_rows}
        self.tag_rows = [existing.get(n) or TransactionTag(name=n) for n in names]

    def to_dict(self):
        return {
            "id": self.id,
            "user_id": self.user_id,
            "amount": float(self.amount),
            "description": self.description,
            "category": self.category,
            "tags": self.tags,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }


class TransactionTag(db.Model):
    __tablename__ = "transaction_tags"

    id = db.Column(db.Integer, primary_key=True)
    transaction_id = db.Column(
        db.Integer,
        db.ForeignKey("transactions.id", ondelete="CASCADE"),
        index=True,
        nullable=False,
    )
    name = db.Column(db.String(50), nullable=False, index=True)

    __table_args__ = (
        db.UniqueConstraint("transaction_id", "name", name="uq_transaction_tag"),
    )
