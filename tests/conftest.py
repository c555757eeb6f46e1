from types import SimpleNamespace

import pytest

from lms import create_app
from lms.config import TestConfig
from lms.extensions import db
from lms.models.author import Author
from lms.models.book import Book
from lms.models.borrower import Borrower
from lms.models.branch import Branch


@pytest.fixture
def app():
    # each app gets its own in-memory database
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def library(app):
    herbert = Author(name="Frank Herbert")
    lib = SimpleNamespace(
        dune=Book(title="Dune", author=herbert),
        anon=Book(title="Anonymous Pamphlet"),
        central=Branch(name="Central", address="1 Main St"),
        east=Branch(name="East Side", address="9 East Ave"),
        alice=Borrower(name="Alice", address="3 Elm St", phone="555-0101"),
        bob=Borrower(name="Bob", address="4 Oak St", phone="555-0102"),
    )
    db.session.add_all(list(vars(lib).values()))
    db.session.commit()
    return lib
