"""
Company Request DTOs

DTOs for company-related API requests.
"""

from pydantic import BaseModel, Field, field_validator
from typing import List, Optional

from constants import CompanyLimits


def _require_text(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValueError(f"{field_name} must not be blank")
    return value


class EmployeeDto(BaseModel):
    """Request DTO for an employee of a company."""

    name: str = Field(max_length=CompanyLimits.NAME_MAX_LENGTH, description="Employee name")
    age: int = Field(
        ge=CompanyLimits.MIN_EMPLOYEE_AGE,
        le=CompanyLimits.MAX_EMPLOYEE_AGE,
        description="Employee age in years"
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Reject blank names."""
        return _require_text(v, "Employee name")


class ProfileDto(BaseModel):
    """Request DTO for a company's registration profile."""

    registered_capital: float = Field(
        ge=0,
        le=CompanyLimits.MAX_REGISTERED_CAPITAL,
        description="Registered capital"
    )
    cert_id: str = Field(max_length=CompanyLimits.CERT_ID_MAX_LENGTH, description="Registration certificate ID")

    @field_validator("cert_id")
    @classmethod
    def validate_cert_id(cls, v):
        """Reject blank certificate IDs."""
        return _require_text(v, "Certificate ID")


class CompanyDto(BaseModel):
    """
    Request DTO for creating a company.

    A company is created together with all of its employees and its
    optional profile in a single request.
    """

    name: str = Field(max_length=CompanyLimits.NAME_MAX_LENGTH, description="Company name")
    employees: List[EmployeeDto] = Field(default_factory=list, description="Employees of the company")
    profile: Optional[ProfileDto] = Field(None, description="Registration profile")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        """Reject blank names."""
        return _require_text(v, "Company name")

    model_config = {
        "json_schema_extra": {
            "example": {
                "name": "IBM",
                "employees": [
                    {"name": "Tom", "age": 19},
                    {"name": "Jim", "age": 21}
                ],
                "profile": {"registered_capital": 100010, "cert_id": "100"}
            }
        }
    }
