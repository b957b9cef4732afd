"""
Ledger entry service: the lifecycle of income and expense records.

Every write goes through validate_entry() first. Nothing reaches the
store unless the entry is valid, and update/delete refuse entries
that were never saved.
"""

import logging
from decimal import Decimal

from personal_finance.exceptions import PreconditionError
from personal_finance.models.enums import EntryStatus, EntryType
from personal_finance.models.ledger_entry import LedgerEntry
from personal_finance.repositories.ledger_entry import LedgerEntryRepository
from personal_finance.services.validation import validate_entry

logger = logging.getLogger(__name__)

NOT_PERSISTED = "entry not yet persisted"


class LedgerEntryService:
    """
    Create, change, remove and query ledger entries.

    The repository is passed in by the caller, which keeps the
    service free of any knowledge about sessions or engines.
    """

    def __init__(self, repository: LedgerEntryRepository):
        self.repository = repository

    def validate(self, entry: LedgerEntry) -> None:
        validate_entry(entry)

    def create(self, entry: LedgerEntry) -> LedgerEntry:
        """
        Validate and save a new entry.

        The store assigns the id. Status is not forced here; an entry
        saved without one gets the PENDING column default.
        """
        with self.repository.transaction():
            self.validate(entry)
            entry = self.repository.save(entry)
        logger.info("Created ledger entry %s for user %s", entry.id, entry.user_id)
        return entry

    def update(self, entry: LedgerEntry) -> LedgerEntry:
        """
        Validate and overwrite an entry that has already been saved.

        Validation runs inside the transaction: a rejected entry rolls
        the session back, so its invalid values are discarded instead
        of riding along with the next commit.
        """
        self._require_id(entry)
        with self.repository.transaction():
            self.validate(entry)
            entry = self.repository.save(entry)
        logger.info("Updated ledger entry %s", entry.id)
        return entry

    def delete(self, entry: LedgerEntry) -> None:
        """
        Delete a saved entry.

        Existence is not re-checked; deleting an id the store no longer
        has is left to the store.
        """
        self._require_id(entry)
        with self.repository.transaction():
            self.repository.delete(entry)
        logger.info("Deleted ledger entry %s", entry.id)

    def search(self, filter_entry: LedgerEntry) -> list[LedgerEntry]:
        """
        Return entries matching every field set on filter_entry.

        Fields left as None match anything, so an empty filter
        returns every entry.
        """
        return self.repository.find_all_by_example(filter_entry)

    def update_status(
        self, entry: LedgerEntry, status: EntryStatus
    ) -> LedgerEntry:
        """
        Set a new status and save the entry.

        Any status can follow any other. The entry must still be
        saved and valid, exactly as for update().
        """
        entry.status = status
        return self.update(entry)

    def get_by_id(self, entry_id: int) -> LedgerEntry | None:
        return self.repository.find_by_id(entry_id)

    def get_balance(self, user_id: int) -> Decimal:
        """
        Settled income minus settled expenses for a user.

        Pending and canceled entries do not count.
        """
        income = self.repository.sum_values(
            user_id, EntryType.INCOME, EntryStatus.SETTLED
        )
        expense = self.repository.sum_values(
            user_id, EntryType.EXPENSE, EntryStatus.SETTLED
        )
        return income - expense

    def _require_id(self, entry: LedgerEntry) -> None:
        if entry.id is None:
            logger.warning("Rejected write on unsaved ledger entry")
            raise PreconditionError(NOT_PERSISTED)
