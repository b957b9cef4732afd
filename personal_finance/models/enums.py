"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored.
"""

import enum


class EntryType(str, enum.Enum):
    """Direction of a ledger entry."""
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class EntryStatus(str, enum.Enum):
    """
    Lifecycle status of a ledger entry.

    Any status may be set at any time; there is no transition graph.
    """
    PENDING = "PENDING"
    SETTLED = "SETTLED"
    CANCELED = "CANCELED"
