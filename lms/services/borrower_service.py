from datetime import datetime, timedelta

from flask import current_app

from lms.exceptions import RetrieveError, UnavailableError
from lms.models.loan import Loan
from lms.repositories.borrower_repo import BorrowerRepo
from lms.repositories.copies_repo import CopiesRepo
from lms.repositories.loan_repo import LoanRepo
from lms.utils.decorators import transactional


class BorrowerService:
    @staticmethod
    @transactional
    def get_borrower(borrower_id: int):
        return BorrowerRepo.get(borrower_id)

    @staticmethod
    @transactional
    def get_loans(borrower):
        return LoanRepo.list_by_borrower(borrower)

    @staticmethod
    @transactional
    def check_out(borrower, branch, book, now: datetime = None):
        """
        Lend one copy of ``book`` from ``branch`` to ``borrower``.

        The loan is due LOAN_PERIOD_DAYS after checkout and the branch's
        copy count drops by one.
        """
        if LoanRepo.get(book, borrower, branch):
            raise UnavailableError("Borrower already has this book out from this branch")

        copies = CopiesRepo.get_copies(branch, book)
        if copies < 1:
            raise UnavailableError("No copies available at this branch")

        now = now or datetime.now()
        days = current_app.config["LOAN_PERIOD_DAYS"]
        loan = Loan(
            book=book,
            borrower=borrower,
            branch=branch,
            date_out=now,
            due_date=now.date() + timedelta(days=days),
        )
        LoanRepo.create(loan)
        CopiesRepo.set_copies(branch, book, copies - 1)

        current_app.logger.info(f"[loans] checked out: {loan}")
        return loan

    @staticmethod
    @transactional
    def return_book(borrower, branch, book):
        loan = LoanRepo.get(book, borrower, branch)
        if not loan:
            raise RetrieveError("Loan not found")

        LoanRepo.delete(loan)
        CopiesRepo.set_copies(branch, book, CopiesRepo.get_copies(branch, book) + 1)

        current_app.logger.info(f"[loans] returned: {loan}")
        return loan
