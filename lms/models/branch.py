from lms.extensions import db


class Branch(db.Model):
    __tablename__ = "tbl_library_branch"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(45), nullable=False)
    address = db.Column(db.String(45), nullable=True)

    def __repr__(self):
        return f"<Branch {self.name}>"
