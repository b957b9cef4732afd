"""SQLAlchemy implementation of the ledger entry store."""

from decimal import Decimal
from typing import Any

from sqlalchemy import select, func

from personal_finance.models.enums import EntryStatus, EntryType
from personal_finance.models.ledger_entry import LedgerEntry
from personal_finance.repositories.base import SQLAlchemyRepository


class LedgerEntryRepository(SQLAlchemyRepository[LedgerEntry]):
    model = LedgerEntry

    def build_example_filters(self, example: LedgerEntry) -> list[Any]:
        filters = super().build_example_filters(example)
        # A filter built with `user=some_user` has no user_id until it
        # is flushed, so read the id from the relationship instead.
        if (
            example.user_id is None
            and example.user is not None
            and example.user.id is not None
        ):
            filters.append(LedgerEntry.user_id == example.user.id)
        return filters

    def sum_values(
        self, user_id: int, entry_type: EntryType, status: EntryStatus
    ) -> Decimal:
        """Sum of entry values for one user, type and status. Zero if none."""
        total = self.db.execute(
            select(func.coalesce(func.sum(LedgerEntry.value), 0)).where(
                LedgerEntry.user_id == user_id,
                LedgerEntry.entry_type == entry_type,
                LedgerEntry.status == status,
            )
        ).scalar()
        return Decimal(str(total))
