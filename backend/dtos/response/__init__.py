"""
Response DTOs

DTOs for outgoing API responses. These decouple the API from database models
and provide a clear contract for what data the API returns.
"""

from .company_response import CompanyResponse, EmployeeResponse, ProfileResponse

__all__ = ["CompanyResponse", "EmployeeResponse", "ProfileResponse"]
