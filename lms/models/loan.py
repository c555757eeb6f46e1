from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from lms.extensions import db

# checkout times closer than this count as the same checkout
DATE_OUT_TOLERANCE = timedelta(hours=2)


@dataclass(frozen=True)
class LoanIdentity:
    """The (book, borrower, branch) triple that identifies a loan."""
    book: Any
    borrower: Any
    branch: Any

    @property
    def is_set(self) -> bool:
        return self is not LoanIdentity.UNSET

    @property
    def key(self):
        # same order as the Loan primary key columns
        return (self.book.id, self.borrower.id, self.branch.id)


# identity of a loan built without book, borrower or branch
LoanIdentity.UNSET = LoanIdentity(None, None, None)


def _times_equal(first, second) -> bool:
    if first is None:
        return second is None
    if second is None:
        return False
    return abs(first - second) < DATE_OUT_TOLERANCE


class Loan(db.Model):
    """
    A book checked out by a borrower from a branch.

    Loans have no surrogate id: at most one loan exists per
    (book, borrower, branch).
    """
    __tablename__ = "tbl_book_loans"

    book_id = db.Column(db.Integer, db.ForeignKey("tbl_book.id"), primary_key=True)
    borrower_id = db.Column(db.Integer, db.ForeignKey("tbl_borrower.id"), primary_key=True, index=True)
    branch_id = db.Column(db.Integer, db.ForeignKey("tbl_library_branch.id"), primary_key=True, index=True)

    date_out = db.Column(db.DateTime, nullable=True)
    due_date = db.Column(db.Date, nullable=True)

    book = db.relationship("Book")
    borrower = db.relationship("Borrower")
    branch = db.relationship("Branch")

    def __init__(self, book=None, borrower=None, branch=None, date_out=None, due_date=None):
        self.book = book
        self.borrower = borrower
        self.branch = branch
        self.date_out = date_out
        self.due_date = due_date

    @property
    def identity(self) -> LoanIdentity:
        if self.book is None and self.borrower is None and self.branch is None:
            return LoanIdentity.UNSET
        return LoanIdentity(self.book, self.borrower, self.branch)

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Loan):
            return NotImplemented
        return (
            self.identity == other.identity
            and _times_equal(self.date_out, other.date_out)
            and self.due_date == other.due_date
        )

    def __hash__(self):
        return hash(self.identity)

    def __str__(self):
        if not self.identity.is_set:
            return "Loan: <unset>"
        title = self.book.title if self.book else "an unknown book"
        author = self.book.author.name if self.book and self.book.author else "an unknown author"
        branch = self.branch.name if self.branch else "an unknown branch"
        borrower = self.borrower.name if self.borrower else "an unknown borrower"
        date_out = self.date_out.isoformat() if self.date_out else "an unknown date"
        due_date = self.due_date.isoformat() if self.due_date else "never"
        return (
            f"Loan: {title} by {author} borrowed from {branch} "
            f"by {borrower} on {date_out}, due {due_date}"
        )
