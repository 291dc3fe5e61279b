"""
Pydantic schemas for application endpoints.
"""
from pydantic import BaseModel, Field

from soulcrush.db.models.application import ApplicationStatus
from soulcrush.schemas.company import CompanyCreate, CompanyResponse


class ApplicationCreate(BaseModel):
    """Schema for adding an application to an existing company."""
    status: str = Field(..., description="Free-form status label", min_length=1)
    date: str = Field(..., description="Date of the application event", min_length=1)


class TrackApplicationRequest(BaseModel):
    """Schema for tracking a new company together with its first application."""
    company: CompanyCreate
    status: ApplicationStatus = Field(
        default=ApplicationStatus.TODO,
        description="Initial status"
    )


class ApplicationResponse(BaseModel):
    """Schema for application response."""
    id: str = Field(..., description="Application ID")
    company_id: str = Field(..., description="ID of the company applied to")
    status: str = Field(..., description="Status label")
    date: str = Field(..., description="Date of the application event")

    class Config:
        from_attributes = True


class ApplicationWithCompanyResponse(BaseModel):
    """Schema for an application listed together with its company."""
    id: str = Field(..., description="Application ID")
    company: CompanyResponse
    status: str = Field(..., description="Status label")
    label: str = Field(..., description="Display text for the status")
    date: str = Field(..., description="Date of the application event")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "7c9e6679-7425-40de-944b-e07fc1f90ae7",
                "company": {
                    "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                    "name": "Acme",
                    "website": "https://acme.com",
                    "ceo": "Jane Doe",
                    "industry": "Widgets"
                },
                "status": "ToDo",
                "label": "To Do",
                "date": "2026-01-27T10:00:00+00:00"
            }
        }
