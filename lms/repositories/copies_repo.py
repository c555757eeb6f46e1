from flask import current_app
from sqlalchemy.orm import joinedload

from lms.extensions import db
from lms.models.copies import BranchCopies, CopiesIdentity

# upper bound of the INTEGER copies column
MAX_COPIES = 2**31 - 1


class CopiesRepo:
    """
    The copy ledger: how many copies of each book every branch holds.

    A count of zero is stored as the absence of a row, so every reader here
    treats "no row" and "0" the same way.
    """

    @staticmethod
    def _find(branch, book):
        return db.session.get(BranchCopies, CopiesIdentity(book, branch).key)

    @staticmethod
    def get_copies(branch, book) -> int:
        if branch is None or book is None:
            return 0
        record = CopiesRepo._find(branch, book)
        return record.copies if record else 0

    @staticmethod
    def set_copies(branch, book, no_of_copies: int):
        """Set the count for a book at a branch; setting 0 removes the row."""
        if no_of_copies < 0:
            raise ValueError("Number of copies must be nonnegative")
        if no_of_copies > MAX_COPIES:
            raise ValueError(f"Number of copies must not exceed {MAX_COPIES}")
        if branch is None or book is None:
            raise ValueError("branch and book are required")

        record = CopiesRepo._find(branch, book)
        if record:
            if no_of_copies > 0:
                record.copies = no_of_copies
            else:
                db.session.delete(record)
        elif no_of_copies > 0:
            db.session.add(BranchCopies(book=book, branch=branch, copies=no_of_copies))
        else:
            return

        # later lookups in the same transaction must see this change
        db.session.flush()
        current_app.logger.info(
            f"[copies] branch={branch.id} book={book.id} copies={no_of_copies}"
        )

    @staticmethod
    def get_all_branch_copies(branch) -> dict:
        if branch is None:
            return {}
        rows = (
            BranchCopies.query
            .options(joinedload(BranchCopies.book))
            .filter_by(branch_id=branch.id)
            .order_by(BranchCopies.book_id)
            .all()
        )
        return {r.book: r.copies for r in rows}

    @staticmethod
    def get_all_book_copies(book) -> dict:
        if book is None:
            return {}
        rows = (
            BranchCopies.query
            .options(joinedload(BranchCopies.branch))
            .filter_by(book_id=book.id)
            .order_by(BranchCopies.branch_id)
            .all()
        )
        return {r.branch: r.copies for r in rows}

    @staticmethod
    def get_all_copies() -> dict:
        rows = (
            BranchCopies.query
            .options(joinedload(BranchCopies.book), joinedload(BranchCopies.branch))
            .order_by(BranchCopies.branch_id, BranchCopies.book_id)
            .all()
        )
        result = {}
        for r in rows:
            result.setdefault(r.branch, {})[r.book] = r.copies
        return result
