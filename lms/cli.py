import click
from flask import current_app
from flask.cli import with_appcontext

from lms.extensions import db
from lms.models.author import Author
from lms.models.book import Book
from lms.models.borrower import Borrower
from lms.models.branch import Branch
from lms.repositories.copies_repo import CopiesRepo

SAMPLE_COPIES = [
    # (branch name, book title, copies)
    ("Central", "Designing Data-Intensive Applications", 3),
    ("Central", "The Pragmatic Programmer", 2),
    ("Riverside", "The Pragmatic Programmer", 1),
    ("Riverside", "An Untitled Manuscript", 4),
]


@click.command("seed")
@with_appcontext
def seed_command():
    """Insert a small demo library (safe to run more than once)."""
    if Branch.query.count() or Book.query.count():
        click.echo("Database already has data, nothing to do.")
        return

    kleppmann = Author(name="Martin Kleppmann")
    hunt = Author(name="Andrew Hunt")
    books = {
        b.title: b for b in [
            Book(title="Designing Data-Intensive Applications", author=kleppmann),
            Book(title="The Pragmatic Programmer", author=hunt),
            Book(title="An Untitled Manuscript"),
        ]
    }
    branches = {
        br.name: br for br in [
            Branch(name="Central", address="1 Main St"),
            Branch(name="Riverside", address="22 River Rd"),
        ]
    }
    db.session.add_all(list(books.values()) + list(branches.values()))
    db.session.add_all([
        Borrower(name="Alice", address="3 Elm St", phone="555-0101"),
        Borrower(name="Bob", address="4 Oak St", phone="555-0102"),
    ])
    db.session.flush()

    for branch_name, title, n in SAMPLE_COPIES:
        CopiesRepo.set_copies(branches[branch_name], books[title], n)

    db.session.commit()
    current_app.logger.info("[seed] Seeded sample data")
    click.echo("Seeded sample data.")
