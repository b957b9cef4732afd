"""
User API endpoints.
"""

from fastapi import APIRouter, Depends, HTTPException

from personal_finance.api.dependencies import get_entry_service, get_user_service
from personal_finance.exceptions import AuthenticationError, BusinessRuleError
from personal_finance.models.user import User
from personal_finance.schemas.user import (
    UserCreate,
    UserResponse,
    AuthenticateRequest,
    BalanceResponse,
)
from personal_finance.services import LedgerEntryService, UserAccountService

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("", response_model=UserResponse, status_code=201)
def register_user(
    request: UserCreate,
    service: UserAccountService = Depends(get_user_service),
):
    """Register a new user. The email must not be in use."""
    try:
        return service.register(User(
            name=request.name,
            email=request.email,
            password=request.password,
        ))
    except BusinessRuleError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.post("/authenticate", response_model=UserResponse)
def authenticate(
    request: AuthenticateRequest,
    service: UserAccountService = Depends(get_user_service),
):
    """Check an email/password pair and return the matching user."""
    try:
        return service.authenticate(request.email, request.password)
    except AuthenticationError as e:
        raise HTTPException(status_code=401, detail=e.message)


@router.get("/{user_id}", response_model=UserResponse)
def get_user(
    user_id: int,
    service: UserAccountService = Depends(get_user_service),
):
    user = service.get_by_id(user_id)
    if user is None:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return user


@router.get("/{user_id}/balance", response_model=BalanceResponse)
def get_user_balance(
    user_id: int,
    user_service: UserAccountService = Depends(get_user_service),
    entry_service: LedgerEntryService = Depends(get_entry_service),
):
    """
    Settled income minus settled expenses.

    Pending and canceled entries are left out of the balance.
    """
    if user_service.get_by_id(user_id) is None:
        raise HTTPException(status_code=404, detail=f"User {user_id} not found")
    return BalanceResponse(
        user_id=user_id,
        balance=entry_service.get_balance(user_id),
    )
