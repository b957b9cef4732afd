"""Business logic services."""

from personal_finance.services.entry_service import LedgerEntryService
from personal_finance.services.user_service import UserAccountService
from personal_finance.services.validation import validate_entry

__all__ = ["LedgerEntryService", "UserAccountService", "validate_entry"]
