from flask import Blueprint, request, jsonify

from lms.exceptions import RetrieveError
from lms.services.librarian_service import LibrarianService
from lms.utils.serializers import book_json, branch_json, copies_json

librarian_bp = Blueprint("librarian", __name__)


# -----------------------------
# Helpers
# -----------------------------
def _json_error(message, code=400):
    return jsonify({"success": False, "message": message}), code


def _load_branch(branch_id: int):
    branch = LibrarianService.get_branch(branch_id)
    if branch is None:
        raise RetrieveError("Branch not found")
    return branch


def _load_book(book_id: int):
    book = LibrarianService.get_book(book_id)
    if book is None:
        raise RetrieveError("Book not found")
    return book


# -----------------------------
# Branches & books
# -----------------------------
@librarian_bp.get("/branches", strict_slashes=False)
def list_branches():
    branches = LibrarianService.get_all_branches()
    return jsonify({"success": True, "data": [branch_json(b) for b in branches]})


@librarian_bp.get("/books", strict_slashes=False)
def list_books():
    books = LibrarianService.get_all_books()
    return jsonify({"success": True, "data": [book_json(b) for b in books]})


@librarian_bp.get("/branch/<int:branch_id>", strict_slashes=False)
def get_branch(branch_id: int):
    try:
        branch = _load_branch(branch_id)
        return jsonify({"success": True, "data": branch_json(branch)})
    except RetrieveError as e:
        return _json_error(str(e), 404)


@librarian_bp.get("/book/<int:book_id>", strict_slashes=False)
def get_book(book_id: int):
    try:
        book = _load_book(book_id)
        return jsonify({"success": True, "data": book_json(book)})
    except RetrieveError as e:
        return _json_error(str(e), 404)


@librarian_bp.put("/branch/<int:branch_id>", strict_slashes=False)
def update_branch(branch_id: int):
    data = request.get_json(silent=True) or {}
    try:
        branch = _load_branch(branch_id)
        if "name" in data:
            name = (data.get("name") or "").strip()
            if not name:
                return _json_error("name must not be empty", 400)
            branch.name = name
        if "address" in data:
            branch.address = data.get("address")
        LibrarianService.update_branch(branch)
        return jsonify({"success": True, "data": branch_json(_load_branch(branch_id))})
    except RetrieveError as e:
        return _json_error(str(e), 404)


# -----------------------------
# Copies
# -----------------------------
@librarian_bp.put("/branch/<int:branch_id>/book/<int:book_id>", strict_slashes=False)
def set_branch_copies(branch_id: int, book_id: int):
    copies = request.args.get("noOfCopies", type=int)
    if copies is None:
        return _json_error("noOfCopies must be an integer", 400)
    try:
        branch = _load_branch(branch_id)
        book = _load_book(book_id)
        LibrarianService.set_branch_copies(branch, book, copies)
        found = LibrarianService.get_copies(book, branch)
        return jsonify({"success": True, "data": copies_json(book, branch, found)})
    except RetrieveError as e:
        return _json_error(str(e), 404)
    except ValueError as e:
        return _json_error(str(e), 400)


@librarian_bp.get("/branch/<int:branch_id>/book/<int:book_id>", strict_slashes=False)
def get_branch_copies(branch_id: int, book_id: int):
    try:
        branch = _load_branch(branch_id)
        book = _load_book(book_id)
        found = LibrarianService.get_copies(book, branch)
        return jsonify({"success": True, "data": copies_json(book, branch, found)})
    except RetrieveError as e:
        return _json_error(str(e), 404)


@librarian_bp.get("/branch/<int:branch_id>/books/copies", strict_slashes=False)
def get_branch_holdings(branch_id: int):
    try:
        branch = _load_branch(branch_id)
        held = LibrarianService.get_all_branch_copies(branch)
        return jsonify({"success": True, "data": [
            {"book": book_json(book), "copies": n} for book, n in held.items()
        ]})
    except RetrieveError as e:
        return _json_error(str(e), 404)


@librarian_bp.get("/book/<int:book_id>/branches/copies", strict_slashes=False)
def get_book_holdings(book_id: int):
    try:
        book = _load_book(book_id)
        held = LibrarianService.get_all_book_copies(book)
        return jsonify({"success": True, "data": [
            {"branch": branch_json(branch), "copies": n} for branch, n in held.items()
        ]})
    except RetrieveError as e:
        return _json_error(str(e), 404)


@librarian_bp.get("/branches/books/copies", strict_slashes=False)
def get_all_copies():
    ledger = LibrarianService.get_all_copies()
    return jsonify({"success": True, "data": [
        {
            "branch": branch_json(branch),
            "books": [{"book": book_json(book), "copies": n} for book, n in books.items()],
        }
        for branch, books in ledger.items()
    ]})
