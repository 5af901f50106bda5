"""
Company Service

Handles business logic for the company aggregate: mapping DTOs to entities,
delegating persistence to CompanyRepository and owning the transaction
boundary of every operation.
"""

from contextlib import contextmanager
from typing import List, Union
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from dtos.request import CompanyDto
from dtos.response import CompanyResponse
from exceptions import ApplicationError, NotFoundError, StorageError, ValidationError
from repositories.company_repository import CompanyRepository
from services.company_mapper import company_dto_to_entity, company_entity_to_dto
from services.interfaces import ICompanyService
from utils.logging_utils import log_operation

logger = logging.getLogger(__name__)


class CompanyService(ICompanyService):
    """Service for company-related business logic."""

    def __init__(self, db: Session):
        """
        Initialize CompanyService.

        Args:
            db: Database session
        """
        self.db = db
        self.company_repo = CompanyRepository(db)

    @contextmanager
    def _transaction(self, operation: str):
        """Commit on success; roll back and translate database errors otherwise."""
        try:
            yield
            self.db.commit()
        except ApplicationError:
            self.db.rollback()
            raise
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"{operation} rolled back: {e}")
            raise StorageError(operation, str(e)) from e

    @staticmethod
    def _coerce_dto(dto: Union[CompanyDto, dict]) -> CompanyDto:
        if isinstance(dto, CompanyDto):
            return dto
        try:
            return CompanyDto.model_validate(dto)
        except PydanticValidationError as e:
            invalid_fields = {
                ".".join(str(part) for part in err["loc"]): err["msg"]
                for err in e.errors()
            }
            raise ValidationError("Invalid company payload", invalid_fields) from e

    @log_operation("add_company")
    def add_company(self, dto: Union[CompanyDto, dict]) -> int:
        dto = self._coerce_dto(dto)
        with self._transaction("add_company"):
            company = company_dto_to_entity(dto)
            company_id = self.company_repo.create_company(company)
        logger.info(
            f"Created company {company_id} ({dto.name}) with "
            f"{len(dto.employees)} employee(s), profile={'yes' if dto.profile else 'no'}"
        )
        return company_id

    @log_operation("get_all_companies")
    def get_all(self) -> List[CompanyResponse]:
        with self._transaction("get_all_companies"):
            companies = self.company_repo.get_all_with_children()
            result = [company_entity_to_dto(c) for c in companies]
        return result

    @log_operation("get_company")
    def get_by_id(self, company_id: int) -> CompanyResponse:
        with self._transaction("get_company"):
            company = self.company_repo.get_with_children(company_id)
            if company is None:
                raise NotFoundError("Company", company_id)
            result = company_entity_to_dto(company)
        return result

    @log_operation("delete_company")
    def delete_company(self, company_id: int) -> None:
        with self._transaction("delete_company"):
            self.company_repo.delete_company(company_id)
        logger.info(f"Deleted company {company_id} with its employees and profile")
