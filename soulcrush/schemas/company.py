"""
Pydantic schemas for company endpoints.
"""
from pydantic import BaseModel, Field


class CompanyBase(BaseModel):
    """Base company schema with common fields."""
    name: str = Field(..., description="Company name", min_length=1)
    website: str = Field(..., description="Company website", min_length=1)
    ceo: str = Field(..., description="Name of the CEO", min_length=1)
    industry: str = Field(..., description="Industry the company works in", min_length=1)


class CompanyCreate(CompanyBase):
    """Schema for creating a new company."""
    pass


class CompanyResponse(CompanyBase):
    """Schema for company response."""
    id: str = Field(..., description="Company ID")

    class Config:
        from_attributes = True
        json_schema_extra = {
            "example": {
                "id": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "name": "Acme",
                "website": "https://acme.com",
                "ceo": "Jane Doe",
                "industry": "Widgets"
            }
        }


class CreatedResponse(BaseModel):
    """Id of a newly created record."""
    id: str = Field(..., description="ID of the created record")
