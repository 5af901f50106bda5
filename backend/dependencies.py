"""
Dependency injection providers for FastAPI.

This module provides factory functions for creating service instances,
following the Dependency Inversion Principle. This allows for easier testing
and better separation of concerns.
"""

from sqlalchemy.orm import Session
from fastapi import Depends
from database import get_db
from services.interfaces import ICompanyService
from services.company_service import CompanyService


def get_company_service(db: Session = Depends(get_db)) -> ICompanyService:
    """
    Factory function for creating CompanyService instances.

    Args:
        db: Database session (injected)

    Returns:
        ICompanyService: Company service implementation

    Note: Tests override get_db to bind the service to an isolated database.
    """
    return CompanyService(db)
