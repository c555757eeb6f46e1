from sqlalchemy.orm import joinedload

from lms.models.book import Book
from lms.models.loan import Loan, LoanIdentity
from lms.extensions import db


def _eager():
    return [
        joinedload(Loan.book).joinedload(Book.author),
        joinedload(Loan.borrower),
        joinedload(Loan.branch),
    ]


class LoanRepo:
    @staticmethod
    def get(book, borrower, branch):
        key = LoanIdentity(book, borrower, branch).key
        return db.session.get(Loan, key, options=_eager())

    @staticmethod
    def list_by_borrower(borrower):
        return (
            Loan.query
            .options(*_eager())
            .filter_by(borrower_id=borrower.id)
            .order_by(Loan.date_out)
            .all()
        )

    @staticmethod
    def create(loan: Loan):
        db.session.add(loan)
        db.session.flush()
        return loan

    @staticmethod
    def delete(loan: Loan):
        db.session.delete(loan)
        db.session.flush()
