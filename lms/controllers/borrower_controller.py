from flask import Blueprint, jsonify

from lms.exceptions import RetrieveError, UnavailableError
from lms.services.borrower_service import BorrowerService
from lms.services.librarian_service import LibrarianService
from lms.utils.serializers import borrower_json, loan_json

borrower_bp = Blueprint("borrower", __name__, url_prefix="/borrower")


def _json_error(message, code=400):
    return jsonify({"success": False, "message": message}), code


def _load_borrower(card_no: int):
    borrower = BorrowerService.get_borrower(card_no)
    if borrower is None:
        raise RetrieveError("Borrower not found")
    return borrower


def _load_loan_parties(card_no: int, branch_id: int, book_id: int):
    borrower = _load_borrower(card_no)
    branch = LibrarianService.get_branch(branch_id)
    if branch is None:
        raise RetrieveError("Branch not found")
    book = LibrarianService.get_book(book_id)
    if book is None:
        raise RetrieveError("Book not found")
    return borrower, branch, book


@borrower_bp.get("/<int:card_no>", strict_slashes=False)
def get_borrower(card_no: int):
    try:
        return jsonify({"success": True, "data": borrower_json(_load_borrower(card_no))})
    except RetrieveError as e:
        return _json_error(str(e), 404)


@borrower_bp.get("/<int:card_no>/loans", strict_slashes=False)
def list_loans(card_no: int):
    try:
        loans = BorrowerService.get_loans(_load_borrower(card_no))
        return jsonify({"success": True, "data": [loan_json(x) for x in loans]})
    except RetrieveError as e:
        return _json_error(str(e), 404)


@borrower_bp.post("/<int:card_no>/branch/<int:branch_id>/book/<int:book_id>/checkout", strict_slashes=False)
def check_out(card_no: int, branch_id: int, book_id: int):
    try:
        borrower, branch, book = _load_loan_parties(card_no, branch_id, book_id)
        loan = BorrowerService.check_out(borrower, branch, book)
        return jsonify({"success": True, "data": loan_json(loan)}), 201
    except RetrieveError as e:
        return _json_error(str(e), 404)
    except UnavailableError as e:
        return _json_error(str(e), 409)


@borrower_bp.post("/<int:card_no>/branch/<int:branch_id>/book/<int:book_id>/return", strict_slashes=False)
def return_book(card_no: int, branch_id: int, book_id: int):
    try:
        borrower, branch, book = _load_loan_parties(card_no, branch_id, book_id)
        loan = BorrowerService.return_book(borrower, branch, book)
        return jsonify({"success": True, "data": loan_json(loan)})
    except RetrieveError as e:
        return _json_error(str(e), 404)
