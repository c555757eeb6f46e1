from lms.models.branch import Branch
from lms.extensions import db


class BranchRepo:
    @staticmethod
    def list_all():
        return Branch.query.order_by(Branch.id).all()

    @staticmethod
    def get(branch_id: int):
        return db.session.get(Branch, branch_id)

    @staticmethod
    def save(branch: Branch):
        db.session.add(branch)
        db.session.flush()
        return branch
