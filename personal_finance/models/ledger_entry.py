"""
Ledger entry model.

Each entry is a single income or expense record for one user
in a given month and year. Unlike a bank ledger, entries here are
mutable: their fields and status can be changed after saving.
"""

from datetime import date
from decimal import Decimal

from sqlalchemy import (
    String, Date, Integer, Numeric, ForeignKey,
    Enum as SAEnum,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from personal_finance.models.base import Base
from personal_finance.models.enums import EntryType, EntryStatus


class LedgerEntry(Base):
    """
    An income or expense record.

    Columns are nullable at the ORM level on purpose: an entry is
    built in memory first and checked by validate_entry() before it
    reaches the database, and a partially filled entry doubles as a
    search filter.
    """

    __tablename__ = "ledger_entries"

    id: Mapped[int | None] = mapped_column(primary_key=True)
    description: Mapped[str | None] = mapped_column(
        String(100), nullable=False
    )
    month: Mapped[int | None] = mapped_column(Integer, nullable=False)
    year: Mapped[int | None] = mapped_column(Integer, nullable=False)
    user_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id"), nullable=False, index=True
    )
    value: Mapped[Decimal | None] = mapped_column(
        Numeric(16, 2), nullable=False
    )
    entry_type: Mapped[EntryType | None] = mapped_column(
        SAEnum(EntryType, name="entry_type_enum", create_constraint=True),
        nullable=False,
    )
    status: Mapped[EntryStatus | None] = mapped_column(
        SAEnum(EntryStatus, name="entry_status_enum", create_constraint=True),
        nullable=False,
        default=EntryStatus.PENDING,
    )
    registered_at: Mapped[date | None] = mapped_column(
        Date, nullable=False, default=date.today
    )

    user: Mapped["User | None"] = relationship()

    def __repr__(self) -> str:
        return (
            f"<LedgerEntry {self.id} {self.month}/{self.year} "
            f"{self.value} ({self.status})>"
        )
