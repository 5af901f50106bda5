"""
Company Response DTOs

DTOs for company-related API responses.
"""

from pydantic import BaseModel, Field
from typing import List, Optional


class EmployeeResponse(BaseModel):
    """Response DTO for an employee."""

    id: int = Field(description="Employee ID")
    name: str = Field(description="Employee name")
    age: int = Field(description="Employee age in years")

    model_config = {"from_attributes": True}


class ProfileResponse(BaseModel):
    """Response DTO for a company profile."""

    id: int = Field(description="Profile ID")
    registered_capital: float = Field(description="Registered capital")
    cert_id: str = Field(description="Registration certificate ID")

    model_config = {"from_attributes": True}


class CompanyResponse(BaseModel):
    """
    Response DTO for a company with its employees and profile.

    This DTO separates the API response from the database model,
    allowing them to evolve independently.
    """

    id: int = Field(description="Company ID")
    name: str = Field(description="Company name")
    employees: List[EmployeeResponse] = Field(default_factory=list, description="Employees in insertion order")
    profile: Optional[ProfileResponse] = Field(None, description="Registration profile, if any")

    model_config = {"from_attributes": True}
