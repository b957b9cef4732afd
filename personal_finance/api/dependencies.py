"""
Service factories for FastAPI's Depends.

Each request gets services wired to repositories over that
request's database session.
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from personal_finance.models.base import get_db
from personal_finance.repositories import LedgerEntryRepository, UserRepository
from personal_finance.services import LedgerEntryService, UserAccountService


def get_entry_service(db: Session = Depends(get_db)) -> LedgerEntryService:
    return LedgerEntryService(LedgerEntryRepository(db))


def get_user_service(db: Session = Depends(get_db)) -> UserAccountService:
    return UserAccountService(UserRepository(db))
