"""
Database models package.

All models must be imported here so that Alembic can discover
them through Base.metadata when generating migrations.
"""

from personal_finance.models.base import Base
from personal_finance.models.enums import EntryType, EntryStatus
from personal_finance.models.user import User
from personal_finance.models.ledger_entry import LedgerEntry

__all__ = [
    "Base",
    "EntryType",
    "EntryStatus",
    "User",
    "LedgerEntry",
]
