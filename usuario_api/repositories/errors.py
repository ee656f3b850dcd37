"""Storage-level errors that services translate into domain outcomes."""


class DuplicateKeyError(Exception):
    """A unique constraint rejected an insert or update."""


class RecordNotFoundError(LookupError):
    """The row to update no longer exists."""
