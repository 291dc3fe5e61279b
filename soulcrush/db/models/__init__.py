"""
Database models module.

This module imports all database models to ensure they are registered with SQLAlchemy's Base.metadata
before table creation.
"""
from soulcrush.db.models.company import Company
from soulcrush.db.models.application import Application, ApplicationStatus

__all__ = [
    "Company",
    "Application",
    "ApplicationStatus",
]
