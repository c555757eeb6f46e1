from lms.extensions import db


class Author(db.Model):
    __tablename__ = "tbl_author"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(45), nullable=False)

    def __repr__(self):
        return f"<Author {self.name}>"
