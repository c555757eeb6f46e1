from flask import Flask, jsonify, current_app
from lms.config import Config
from lms.extensions import db, migrate
from lms.exceptions import TransactionError

from lms.db_objects import ensure_db_objects


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # 1) db first; everything below needs db.engine / db.session
    db.init_app(app)

    # 2) tables (and the copies check constraint)
    ensure_db_objects(app)

    # 3) migrations
    migrate.init_app(app, db)

    # 4) API blueprints
    from lms.controllers.librarian_controller import librarian_bp
    from lms.controllers.borrower_controller import borrower_bp
    app.register_blueprint(librarian_bp)
    app.register_blueprint(borrower_bp)

    # 5) CLI
    from lms.cli import seed_command
    app.cli.add_command(seed_command)

    @app.errorhandler(TransactionError)
    def handle_transaction_error(e):
        current_app.logger.exception(f"[app] transaction error: {e}")
        return jsonify({"success": False, "message": "Internal storage error"}), 500

    @app.get("/health")
    def health():
        return jsonify({"ok": True})

    return app
