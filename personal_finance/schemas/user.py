"""
Pydantic schemas for user operations.

Responses never include the password hash.
"""

from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    name: str = Field(default="", max_length=150)
    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=1, max_length=255)


class AuthenticateRequest(BaseModel):
    email: str
    password: str


class UserResponse(BaseModel):
    id: int
    name: str | None
    email: str
    registered_at: date

    model_config = {"from_attributes": True}


class BalanceResponse(BaseModel):
    """Settled income minus settled expenses."""
    user_id: int
    balance: Decimal
