"""
User model.

Represents the owner of ledger entries. A user is created once
at registration and never modified by the services afterwards.
"""

from datetime import date

from sqlalchemy import String, Date
from sqlalchemy.orm import Mapped, mapped_column

from personal_finance.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int | None] = mapped_column(primary_key=True)
    name: Mapped[str | None] = mapped_column(String(150), nullable=True)
    # The unique constraint is what actually guarantees uniqueness
    # when two registrations with the same email race.
    email: Mapped[str] = mapped_column(
        String(255), unique=True, nullable=False, index=True
    )
    # argon2 hash, never the plaintext password
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    registered_at: Mapped[date] = mapped_column(
        Date, nullable=False, default=date.today
    )

    def __repr__(self) -> str:
        return f"<User {self.id} {self.email}>"
