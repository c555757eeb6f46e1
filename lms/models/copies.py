from dataclasses import dataclass
from typing import Any

from lms.extensions import db


@dataclass(frozen=True)
class CopiesIdentity:
    """Addresses one (book, branch) cell of the copy ledger."""
    book: Any
    branch: Any

    @property
    def key(self):
        # same order as the BranchCopies primary key columns
        return (self.book.id, self.branch.id)


class BranchCopies(db.Model):
    """
    Number of copies of a book held by a branch.

    Rows only exist for positive counts: a branch that holds no copies of a
    book has no row at all, and the check constraint keeps it that way.
    """
    __tablename__ = "tbl_book_copies"

    book_id = db.Column(db.Integer, db.ForeignKey("tbl_book.id"), primary_key=True)
    branch_id = db.Column(db.Integer, db.ForeignKey("tbl_library_branch.id"), primary_key=True, index=True)

    copies = db.Column(db.Integer, nullable=False)

    book = db.relationship("Book")
    branch = db.relationship("Branch")

    __table_args__ = (
        db.CheckConstraint("copies > 0", name="chk_book_copies_positive"),
    )

    def __repr__(self):
        return f"<BranchCopies book={self.book_id} branch={self.branch_id} copies={self.copies}>"
