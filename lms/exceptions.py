class TransactionError(Exception):
    """Unexpected failure while talking to the database."""


class RetrieveError(TransactionError):
    """A branch, book, borrower or loan addressed by id does not exist."""


class UnavailableError(ValueError):
    """The request is well formed but the library state forbids it."""
