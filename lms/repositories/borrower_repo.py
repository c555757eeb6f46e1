from lms.models.borrower import Borrower
from lms.extensions import db


class BorrowerRepo:
    @staticmethod
    def get(borrower_id: int):
        return db.session.get(Borrower, borrower_id)
