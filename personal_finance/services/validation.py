"""
Ledger entry validation.

The rules are checked in a fixed order and the first failure wins,
so an entry with several problems always reports the same message.
Clients match on these messages; do not reword them.
"""

from personal_finance.exceptions import ValidationError
from personal_finance.models.ledger_entry import LedgerEntry

INVALID_DESCRIPTION = "Informe uma Descrição válida."
INVALID_MONTH = "Informe um Mês válido."
INVALID_YEAR = "Informe um Ano válido."
MISSING_USER = "Informe um Usuário."
INVALID_VALUE = "Informe um Valor válido."
MISSING_TYPE = "Informe um tipo de lançamento."

MAX_YEAR_DIGITS = 4


def validate_entry(entry: LedgerEntry) -> None:
    """
    Raise ValidationError for the first rule the entry breaks.

    1. description present and not blank
    2. month in 1..12
    3. year positive, at most 4 digits
    4. user present and already saved (has an id); a bare user_id
       foreign key counts when no user object is attached
    5. value greater than zero
    6. entry_type present
    """
    if entry.description is None or not entry.description.strip():
        raise ValidationError(INVALID_DESCRIPTION)

    if entry.month is None or not 1 <= entry.month <= 12:
        raise ValidationError(INVALID_MONTH)

    if (
        entry.year is None
        or entry.year <= 0
        or len(str(entry.year)) > MAX_YEAR_DIGITS
    ):
        raise ValidationError(INVALID_YEAR)

    # An unsaved user is as good as no user
    user_id = entry.user.id if entry.user is not None else entry.user_id
    if user_id is None:
        raise ValidationError(MISSING_USER)

    if entry.value is None or entry.value <= 0:
        raise ValidationError(INVALID_VALUE)

    if entry.entry_type is None:
        raise ValidationError(MISSING_TYPE)
