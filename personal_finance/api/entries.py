"""
Ledger entry API endpoints.

The API layer is thin: it turns request bodies into LedgerEntry
objects, calls LedgerEntryService and maps domain errors to HTTP
status codes. All business rules live in the service.
"""

from fastapi import APIRouter, Depends, HTTPException, Response

from personal_finance.api.dependencies import get_entry_service, get_user_service
from personal_finance.exceptions import PreconditionError, ValidationError
from personal_finance.models.enums import EntryType, EntryStatus
from personal_finance.models.ledger_entry import LedgerEntry
from personal_finance.schemas.ledger_entry import (
    LedgerEntryWrite,
    LedgerEntryResponse,
    StatusUpdate,
)
from personal_finance.services import LedgerEntryService, UserAccountService

router = APIRouter(prefix="/entries", tags=["Ledger Entries"])


def _get_or_404(service: LedgerEntryService, entry_id: int) -> LedgerEntry:
    entry = service.get_by_id(entry_id)
    if entry is None:
        raise HTTPException(
            status_code=404, detail=f"Entry {entry_id} not found"
        )
    return entry


def _apply(
    entry: LedgerEntry,
    request: LedgerEntryWrite,
    user_service: UserAccountService,
) -> LedgerEntry:
    """
    Copy the request fields onto an entry.

    An unknown user_id resolves to no user, which validation
    reports as a missing user. A missing status is left alone so
    new entries fall back to the PENDING default.
    """
    fields = request.model_dump(exclude={"user_id", "status"})
    for name, value in fields.items():
        setattr(entry, name, value)
    if request.status is not None:
        entry.status = request.status
    user = (
        user_service.get_by_id(request.user_id)
        if request.user_id is not None
        else None
    )
    # Keep the foreign key in step with the relationship
    entry.user = user
    entry.user_id = user.id if user is not None else None
    return entry


@router.post("", response_model=LedgerEntryResponse, status_code=201)
def create_entry(
    request: LedgerEntryWrite,
    service: LedgerEntryService = Depends(get_entry_service),
    user_service: UserAccountService = Depends(get_user_service),
):
    """Create a new entry. Its status starts as PENDING unless given."""
    try:
        return service.create(_apply(LedgerEntry(), request, user_service))
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.get("", response_model=list[LedgerEntryResponse])
def search_entries(
    description: str | None = None,
    month: int | None = None,
    year: int | None = None,
    user_id: int | None = None,
    entry_type: EntryType | None = None,
    status: EntryStatus | None = None,
    service: LedgerEntryService = Depends(get_entry_service),
):
    """
    Search entries. Every query parameter given must match exactly;
    parameters left out match anything.
    """
    return service.search(LedgerEntry(
        description=description,
        month=month,
        year=year,
        user_id=user_id,
        entry_type=entry_type,
        status=status,
    ))


@router.get("/{entry_id}", response_model=LedgerEntryResponse)
def get_entry(
    entry_id: int,
    service: LedgerEntryService = Depends(get_entry_service),
):
    return _get_or_404(service, entry_id)


@router.put("/{entry_id}", response_model=LedgerEntryResponse)
def update_entry(
    entry_id: int,
    request: LedgerEntryWrite,
    service: LedgerEntryService = Depends(get_entry_service),
    user_service: UserAccountService = Depends(get_user_service),
):
    """Replace the fields of an existing entry."""
    entry = _get_or_404(service, entry_id)
    try:
        return service.update(_apply(entry, request, user_service))
    except (ValidationError, PreconditionError) as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.patch("/{entry_id}/status", response_model=LedgerEntryResponse)
def update_entry_status(
    entry_id: int,
    request: StatusUpdate,
    service: LedgerEntryService = Depends(get_entry_service),
):
    """Set any status on an existing entry."""
    entry = _get_or_404(service, entry_id)
    try:
        return service.update_status(entry, request.status)
    except (ValidationError, PreconditionError) as e:
        raise HTTPException(status_code=400, detail=e.message)


@router.delete("/{entry_id}", status_code=204)
def delete_entry(
    entry_id: int,
    service: LedgerEntryService = Depends(get_entry_service),
):
    entry = _get_or_404(service, entry_id)
    try:
        service.delete(entry)
    except PreconditionError as e:
        raise HTTPException(status_code=400, detail=e.message)
    return Response(status_code=204)
