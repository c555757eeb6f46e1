from lms.extensions import db


class Borrower(db.Model):
    __tablename__ = "tbl_borrower"

    # the card number doubles as the primary key
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(45), nullable=False)
    address = db.Column(db.String(45), nullable=True)
    phone = db.Column(db.String(45), nullable=True)

    def __repr__(self):
        return f"<Borrower {self.name}>"
