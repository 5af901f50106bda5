"""
Request DTOs

DTOs for incoming API requests. These decouple the API from database models
and provide a clear contract for what data the API expects.
"""

from .company_request import CompanyDto, EmployeeDto, ProfileDto

__all__ = ["CompanyDto", "EmployeeDto", "ProfileDto"]
