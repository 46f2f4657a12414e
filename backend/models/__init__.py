from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# register every table on the metadata before create_all()
from models.user_model import User  # noqa: E402,F401
from models.transaction_model import Transaction, TransactionTag  # noqa: E402,F401
from models.label_models import Category, Tag  # noqa: E402,F401
