from models import db


DEFAULT_CATEGORIES = (
    "Food & Dining",
    "Shopping",
    "Transportation",
    "Bills & Utilities",
    "Entertainment",
    "Health & Wellness",
    "Travel",
    "Other",
)

# emotional tags
DEFAULT_TAGS = (
    "Happy",
    "Stressed",
    "Impulsive",
    "Rewarding",
    "Necessary",
    "Regretful",
)


class Category(db.Model):
    __tablename__ = "categories"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), index=True, nullable=False)
    name = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.UniqueConstraint("user_id", "name", name="uq_user_category"),
    )

    def to_dict(self):
        return {"id": self.id, "name": self.name}


class Tag(db.Model):
    __tablename__ = "tags"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), index=True, nullable=False)
    name = db.Column(db.String(50), nullable=False)
    created_at = db.Column(db.DateTime, server_default=db.func.now())

    __table_args__ = (
        db.UniqueConstraint("user_id", "name", name="uq_user_tag"),
    )

    def to_dict(self):
        return {"id": self.id, "name": self.name}
