from lms.extensions import db


def ensure_db_objects(app):
    """
    Create any missing tables. The copies table carries a CHECK constraint
    so a zero count can never be stored.
    """
    if not app.config.get("AUTO_CREATE_TABLES"):
        return

    # models must be imported before create_all can see their tables
    from lms.models import author, book, branch, borrower, copies, loan  # noqa: F401

    with app.app_context():
        try:
            db.create_all()
            app.logger.info("[db_objects] Tables ensured.")
        except Exception as e:
            app.logger.error(f"[db_objects] Error: {e}")
            raise
