"""
Pydantic schemas for ledger entry operations.

Request schemas only check shape and types. Business validation
(month range, positive value, saved user...) belongs to
validate_entry(), so requests may carry missing or out-of-range
values and still reach the service, which reports the exact message.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel

from personal_finance.models.enums import EntryType, EntryStatus


# --- Request Schemas ---

class LedgerEntryWrite(BaseModel):
    """Body for creating or replacing an entry."""
    description: str | None = None
    month: int | None = None
    year: int | None = None
    user_id: int | None = None
    value: Decimal | None = None
    entry_type: EntryType | None = None
    status: EntryStatus | None = None


class StatusUpdate(BaseModel):
    status: EntryStatus


# --- Response Schemas ---

class LedgerEntryResponse(BaseModel):
    id: int
    description: str
    month: int
    year: int
    user_id: int
    value: Decimal
    entry_type: EntryType
    status: EntryStatus
    registered_at: date

    model_config = {"from_attributes": True}
