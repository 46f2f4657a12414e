import logging

from flask import Flask, jsonify
from flask_cors import CORS

from models import db
from auth.guard import init_jwt
from auth.routes import auth_bp
from errors import register_error_handlers
from labels.routes import labels_bp
from transactions.routes import transactions_bp
from config import Config

logger = logging.getLogger(__name__)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    logging.basicConfig(level=app.config.get("LOG_LEVEL", "INFO"))

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}})

    db.init_app(app)
    with app.app_context():
        db.create_all()
    init_jwt(app)

    register_error_handlers(app)

    app.register_blueprint(auth_bp)
    app.register_blueprint(transactions_bp)
    app.register_blueprint(labels_bp)

    @app.route("/api/health", methods=["GET"])
    def health():
        return jsonify({"status": "OK", "message": "Server is running"})

    logger.info("App created (env=%s)", app.config.get("APP_ENV"))
    return app


if __name__ == "__main__":
    app = create_app()
    app.run(
        port=app.config["PORT"],
        debug=app.config["APP_ENV"] == "development",
    )
