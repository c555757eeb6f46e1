from lms.models.book import Book
from lms.extensions import db


class BookRepo:
    @staticmethod
    def list_all():
        return Book.query.order_by(Book.id).all()

    @staticmethod
    def get(book_id: int):
        return db.session.get(Book, book_id)
