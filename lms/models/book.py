from lms.extensions import db


class Book(db.Model):
    __tablename__ = "tbl_book"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(45), nullable=False, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey("tbl_author.id"), nullable=True, index=True)

    author = db.relationship("Author", backref="books")

    def __repr__(self):
        return f"<Book {self.title}>"
