"""Persistence layer: one repository per model."""

from personal_finance.repositories.base import SQLAlchemyRepository
from personal_finance.repositories.ledger_entry import LedgerEntryRepository
from personal_finance.repositories.user import UserRepository

__all__ = ["SQLAlchemyRepository", "LedgerEntryRepository", "UserRepository"]
