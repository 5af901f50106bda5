"""
Company API endpoints
"""
from fastapi import APIRouter, Depends, Response
from typing import List
import logging

from constants import HTTPStatus, Routes
from dependencies import get_company_service
from dtos.request import CompanyDto
from dtos.response import CompanyResponse
from services.interfaces import ICompanyService
from utils.error_handlers import handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(Routes.COMPANIES, response_model=CompanyResponse, status_code=HTTPStatus.CREATED)
@handle_api_errors("Create company")
def create_company(
    company: CompanyDto,
    response: Response,
    company_service: ICompanyService = Depends(get_company_service)
):
    """
    Create a company together with its employees and profile.

    Returns:
        CompanyResponse: The stored company, with the Location header
        pointing at the new resource
    """
    company_id = company_service.add_company(company)
    response.headers["Location"] = Routes.company(company_id)
    return company_service.get_by_id(company_id)


@router.get(Routes.COMPANIES, response_model=List[CompanyResponse])
@handle_api_errors("List companies")
def list_companies(company_service: ICompanyService = Depends(get_company_service)):
    """List all companies with nested employees and profile."""
    return company_service.get_all()


@router.get(Routes.COMPANIES + "/{company_id}", response_model=CompanyResponse)
@handle_api_errors("Get company")
def get_company(
    company_id: int,
    company_service: ICompanyService = Depends(get_company_service)
):
    """
    Get a specific company

    Raises:
        HTTPException: 404 if the company does not exist
    """
    return company_service.get_by_id(company_id)


@router.delete(Routes.COMPANIES + "/{company_id}", status_code=HTTPStatus.NO_CONTENT)
@handle_api_errors("Delete company")
def delete_company(
    company_id: int,
    company_service: ICompanyService = Depends(get_company_service)
):
    """
    Delete a company; its employees and profile are removed with it.

    Raises:
        HTTPException: 404 if the company does not exist
    """
    company_service.delete_company(company_id)
    return Response(status_code=HTTPStatus.NO_CONTENT)
