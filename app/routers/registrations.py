# app/routers/registrations.py
"""
Parking registrations: approve, list, and move through the status lifecycle.
POST  /registrations              — validate + approve a form submission
GET   /registrations              — latest first, filterable by status / occupant type
PATCH /registrations/{id}/status  — mark parked / completed
"""

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from typing import Optional
from app.config import settings
from app.database import exclusive, get_db
from app.schemas.registration import (
    RegistrationCandidate, RegistrationOut, RejectionOut, StatusUpdate, StatusUpdateOut,
)
from app.services.approval_service import approve_registration
from app.services import registration_store as store
from app.services.registration_store import InvalidStatusTransition
from app.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


def _to_out(registration) -> RegistrationOut:
    registration.available_actions = list(store.allowed_transitions(registration.status))
    return RegistrationOut.model_validate(registration)


@router.post("/registrations", response_model=RegistrationOut, status_code=201,
             responses={422: {"model": RejectionOut}}, summary="Approve a parking registration")
async def create_registration(body: RegistrationCandidate, db: Session = Depends(get_db)):
    """
    Runs the slot rules against every existing registration.
    A rejection comes back as 422 with the submitted input echoed so the form can be corrected.
    """
    with exclusive(db):
        result = await approve_registration(db, body)
        if result.accepted:
            return _to_out(result.registration)

    rejection = result.rejection
    return JSONResponse(
        status_code=422,
        content=RejectionOut(
            reason=rejection.kind.value,
            slot=rejection.slot,
            detail=rejection.message,
            candidate=body,
        ).model_dump(),
    )


@router.get("/registrations", response_model=list[RegistrationOut], summary="List registrations")
def list_registrations(status: Optional[str] = None, occupant_type: Optional[str] = None,
                       db: Session = Depends(get_db)):
    with exclusive(db):
        return [_to_out(r) for r in store.list_registrations(db, status, occupant_type)]


@router.get("/registrations/{registration_id}", response_model=RegistrationOut)
def get_registration(registration_id: str, db: Session = Depends(get_db)):
    with exclusive(db):
        registration = store.get_registration(db, registration_id)
        if not registration:
            raise HTTPException(status_code=404, detail=f"Registration '{registration_id}' not found")
        return _to_out(registration)


@router.patch("/registrations/{registration_id}/status", response_model=StatusUpdateOut,
              summary="Update registration status")
async def update_registration_status(registration_id: str, body: StatusUpdate,
                                     db: Session = Depends(get_db)):
    """Unknown ids are not an error: the response just reports updated=false."""
    with exclusive(db):
        try:
            registration = store.update_status(
                db, registration_id, body.status,
                enforce_transitions=settings.ENFORCE_STATUS_TRANSITIONS,
            )
        except InvalidStatusTransition as e:
            raise HTTPException(status_code=409, detail=str(e))

        if registration is None:
            return StatusUpdateOut(id=registration_id, updated=False)
        return StatusUpdateOut(id=registration_id, updated=True, status=registration.status)


@router.get("/accounts/{email}/registrations", response_model=list[RegistrationOut],
            summary="Registrations on one account")
def get_account_registrations(email: str, db: Session = Depends(get_db)):
    with exclusive(db):
        return [_to_out(r) for r in store.registrations_for_email(db, email)]
