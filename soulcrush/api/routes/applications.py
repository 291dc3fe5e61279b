"""
Application endpoints for the tracker.

Deleting an application also deletes the company it was sent to.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from soulcrush.core.errors import InvalidStatus, NotFound
from soulcrush.db.session import get_db
from soulcrush.schemas.application import (
    ApplicationWithCompanyResponse,
    TrackApplicationRequest,
)
from soulcrush.services import tracker_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("", response_model=List[ApplicationWithCompanyResponse])
def list_applications(db: Session = Depends(get_db)):
    """List every application with its company, newest first."""
    try:
        applications = tracker_service.list_applications(db)
        return [ApplicationWithCompanyResponse.model_validate(a) for a in applications]
    except Exception as e:
        logger.error(f"Failed to fetch applications: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch applications"
        )


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=ApplicationWithCompanyResponse,
)
def track_application(request: TrackApplicationRequest, db: Session = Depends(get_db)):
    """
    Track a new application.
    
    Creates the company and the application together, dated now.
    """
    try:
        application = tracker_service.track_application(
            db,
            name=request.company.name,
            website=request.company.website,
            ceo=request.company.ceo,
            industry=request.company.industry,
            status=request.status,
        )
        return ApplicationWithCompanyResponse.model_validate(application)
    except Exception as e:
        logger.error(f"Failed to track application: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to track application"
        )


@router.get("/{application_id}", response_model=ApplicationWithCompanyResponse)
def get_application(application_id: str, db: Session = Depends(get_db)):
    try:
        application = tracker_service.get_application(db, application_id)
        return ApplicationWithCompanyResponse.model_validate(application)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{application_id}/advance", response_model=ApplicationWithCompanyResponse)
def advance_application(application_id: str, db: Session = Depends(get_db)):
    """Move an application to its next status."""
    try:
        application = tracker_service.advance_application_status(db, application_id)
        return ApplicationWithCompanyResponse.model_validate(application)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except InvalidStatus as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_application(application_id: str, db: Session = Depends(get_db)):
    """
    Delete an application.
    
    The company it was sent to is deleted in the same transaction.
    """
    try:
        tracker_service.delete_application(db, application_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete application"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
