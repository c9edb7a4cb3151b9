# backend/routes/service_requests.py
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database import get_db
from models.service_request import ServiceRequest
from models.users import new_id
from schemas.service_request import ServiceRequestCreate, ServiceRequestUpdate, ServiceRequestResponse
from utils.audit import write_log, client_ip
from utils.tokenJWT import get_current_user_id

router = APIRouter(prefix="/api/service-requests", tags=["Service Requests"])
logger = logging.getLogger(__name__)

NOT_FOUND = "Service request not found"


def _to_out(sr: ServiceRequest) -> ServiceRequestResponse:
    return ServiceRequestResponse.model_validate(sr)


# Records owned by someone else are reported exactly like missing ones
def _owned_or_404(db: Session, request_id: str, user_id: str) -> ServiceRequest:
    sr = (
        db.query(ServiceRequest)
        .filter(ServiceRequest.id == request_id, ServiceRequest.owner_id == user_id)
        .first()
    )
    if sr is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)
    return sr


def _store_failure(db: Session, message: str, user_id: str) -> HTTPException:
    db.rollback()
    logger.exception("%s (user=%s)", message, user_id)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


# Create a service request owned by the caller
@router.post("", response_model=ServiceRequestResponse, status_code=status.HTTP_201_CREATED)
def create_service_request(
    payload: ServiceRequestCreate,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    # Owner always comes from the token; ownerId in the body is not part of the schema
    sr = ServiceRequest(**payload.model_dump(), id=new_id(), owner_id=user_id)
    try:
        db.add(sr)
        write_log(db, user_id=user_id, action="SERVICE_REQUEST_CREATE", resource="service_requests",
                  ip=client_ip(request), meta={"service_request_id": sr.id}, commit=False)
        db.commit()
        db.refresh(sr)
    except SQLAlchemyError:
        raise _store_failure(db, "Error creating service request", user_id)

    return _to_out(sr)


# List the caller's service requests, oldest first
@router.get("", response_model=List[ServiceRequestResponse])
def list_service_requests(
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        rows = (
            db.query(ServiceRequest)
            .filter(ServiceRequest.owner_id == user_id)
            .order_by(ServiceRequest.created_at.asc(), ServiceRequest.id.asc())
            .all()
        )
    except SQLAlchemyError:
        raise _store_failure(db, "Error fetching service requests", user_id)
    return [_to_out(sr) for sr in rows]


@router.get("/{request_id}", response_model=ServiceRequestResponse)
def get_service_request(
    request_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    try:
        sr = _owned_or_404(db, request_id, user_id)
    except SQLAlchemyError:
        raise _store_failure(db, "Error fetching service request", user_id)
    return _to_out(sr)


# Update status, comments and completion evidence; other fields are never touched
@router.put("/{request_id}", response_model=ServiceRequestResponse)
def update_service_request(
    request_id: str,
    payload: ServiceRequestUpdate,
    request: Request,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db),
):
    changes = payload.changes()
    try:
        sr = _owned_or_404(db, request_id, user_id)
        for field, value in changes.items():
            setattr(sr, field, value)
        sr.touch()

        meta = {"service_request_id": sr.id, "fields": sorted(changes)}
        if "status" in changes:
            meta["status"] = sr.status.value
        write_log(db, user_id=user_id, action="SERVICE_REQUEST_UPDATE", resource="service_requests",
                  ip=client_ip(request), meta=meta, commit=False)
        db.commit()
        db.refresh(sr)
    except SQLAlchemyError:
        raise _store_failure(db, "Error updating service request", user_id)
    return _to_out(sr)
