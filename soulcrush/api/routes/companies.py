"""
Company endpoints.

Deleting a company also deletes every application sent to it.
"""
import logging
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from soulcrush.core.errors import ForeignKeyViolation, NotFound
from soulcrush.db.session import get_db
from soulcrush.schemas.application import ApplicationCreate, ApplicationResponse
from soulcrush.schemas.company import CompanyCreate, CompanyResponse, CreatedResponse
from soulcrush.services import tracker_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.post("", status_code=status.HTTP_201_CREATED, response_model=CreatedResponse)
def create_company(company_data: CompanyCreate, db: Session = Depends(get_db)):
    """Create a company and return its id."""
    try:
        company_id = tracker_service.create_company(
            db,
            name=company_data.name,
            website=company_data.website,
            ceo=company_data.ceo,
            industry=company_data.industry,
        )
        return CreatedResponse(id=company_id)
    except Exception as e:
        logger.error(f"Failed to create company: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create company"
        )


@router.get("/{company_id}", response_model=CompanyResponse)
def get_company(company_id: str, db: Session = Depends(get_db)):
    try:
        company = tracker_service.get_company(db, company_id)
        return CompanyResponse.model_validate(company)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.get("/{company_id}/applications", response_model=List[ApplicationResponse])
def list_company_applications(company_id: str, db: Session = Depends(get_db)):
    """List the applications sent to one company, newest first."""
    try:
        applications = tracker_service.list_applications_for_company(db, company_id)
        return [ApplicationResponse.model_validate(a) for a in applications]
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post(
    "/{company_id}/applications",
    status_code=status.HTTP_201_CREATED,
    response_model=CreatedResponse,
)
def create_company_application(
    company_id: str,
    application_data: ApplicationCreate,
    db: Session = Depends(get_db)
):
    """
    Add an application to an existing company.
    
    Returns 409 if the company does not exist.
    """
    try:
        application_id = tracker_service.create_application(
            db,
            company_id=company_id,
            status=application_data.status,
            date=application_data.date,
        )
        return CreatedResponse(id=application_id)
    except ForeignKeyViolation as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to create application: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create application"
        )


@router.delete("/{company_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_company(company_id: str, db: Session = Depends(get_db)):
    """Delete a company and all of its applications."""
    try:
        tracker_service.delete_company(db, company_id)
    except NotFound as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except Exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete company"
        )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
