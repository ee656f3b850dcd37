"""
Persistence adapters.

Repositories translate between SQLAlchemy rows and the domain records; services
only ever see the records. Any object with the same methods (the in-memory
fakes used by the tests, for instance) can stand in for them.
"""

from .errors import DuplicateKeyError, RecordNotFoundError
from .sql_repository import AccountRepository, AddressRepository, PhoneRepository

__all__ = ["AccountRepository", "AddressRepository", "PhoneRepository", "DuplicateKeyError", "RecordNotFoundError"]
