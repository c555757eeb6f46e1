from lms.models.branch import Branch
from lms.repositories.book_repo import BookRepo
from lms.repositories.branch_repo import BranchRepo
from lms.repositories.copies_repo import CopiesRepo
from lms.utils.decorators import transactional


class LibrarianService:
    """Branch maintenance and copy counts, as seen from a branch librarian."""

    @staticmethod
    @transactional
    def get_all_branches():
        return BranchRepo.list_all()

    @staticmethod
    @transactional
    def get_all_books():
        return BookRepo.list_all()

    @staticmethod
    @transactional
    def get_branch(branch_id: int):
        return BranchRepo.get(branch_id)

    @staticmethod
    @transactional
    def get_book(book_id: int):
        return BookRepo.get(book_id)

    @staticmethod
    @transactional
    def update_branch(branch: Branch):
        return BranchRepo.save(branch)

    @staticmethod
    @transactional
    def set_branch_copies(branch, book, no_of_copies: int):
        CopiesRepo.set_copies(branch, book, no_of_copies)

    @staticmethod
    @transactional
    def get_copies(book, branch) -> int:
        return CopiesRepo.get_copies(branch, book)

    @staticmethod
    @transactional
    def get_all_copies():
        return CopiesRepo.get_all_copies()

    @staticmethod
    @transactional
    def get_all_branch_copies(branch):
        return CopiesRepo.get_all_branch_copies(branch)

    @staticmethod
    @transactional
    def get_all_book_copies(book):
        return CopiesRepo.get_all_book_copies(book)
