"""
Company Mapper

Pure conversions between the company DTOs and the ORM entities.
Neither function touches a database session.
"""

from typing import Optional

from models import Company, Employee, Profile
from dtos.request import CompanyDto, EmployeeDto, ProfileDto
from dtos.response import CompanyResponse, EmployeeResponse, ProfileResponse


def employee_dto_to_entity(dto: EmployeeDto) -> Employee:
    return Employee(name=dto.name, age=dto.age)


def profile_dto_to_entity(dto: Optional[ProfileDto]) -> Optional[Profile]:
    if dto is None:
        return None
    return Profile(registered_capital=dto.registered_capital, cert_id=dto.cert_id)


def company_dto_to_entity(dto: CompanyDto) -> Company:
    """
    Build a transient Company aggregate from a request DTO.

    Employees keep the order they had in the request.
    """
    company = Company(name=dto.name)
    company.employees = [employee_dto_to_entity(e) for e in dto.employees]
    company.profile = profile_dto_to_entity(dto.profile)
    return company


def employee_entity_to_dto(employee: Employee) -> EmployeeResponse:
    return EmployeeResponse(id=employee.id, name=employee.name, age=employee.age)


def profile_entity_to_dto(profile: Optional[Profile]) -> Optional[ProfileResponse]:
    if profile is None:
        return None
    return ProfileResponse(
        id=profile.id,
        registered_capital=profile.registered_capital,
        cert_id=profile.cert_id
    )


def company_entity_to_dto(company: Company) -> CompanyResponse:
    """Convert a persisted Company aggregate into its response DTO."""
    return CompanyResponse(
        id=company.id,
        name=company.name,
        employees=[employee_entity_to_dto(e) for e in company.employees],
        profile=profile_entity_to_dto(company.profile)
    )
