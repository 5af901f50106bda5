"""
Company repository for company aggregate data access operations.
"""

from typing import List, Optional
from sqlalchemy.orm import Session, selectinload

from models import Company, Employee, Profile
from exceptions import NotFoundError
from .base_repository import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    """
    Repository for the Company aggregate.

    A company is always written and removed together with its employees
    and profile.
    """

    def __init__(self, db: Session):
        super().__init__(db, Company)

    def _with_children(self):
        return self.db.query(self.model).options(
            selectinload(self.model.employees),
            selectinload(self.model.profile)
        )

    def create_company(self, company: Company) -> int:
        """
        Persist a company together with its children in one flush.

        Args:
            company: Transient company with employees/profile attached

        Returns:
            The new company ID
        """
        self.create(company)
        return company.id

    def get_with_children(self, company_id: int) -> Optional[Company]:
        """
        Get a company with its employees and profile eagerly loaded.

        Args:
            company_id: Company ID

        Returns:
            Company instance, or None if not found
        """
        return self._with_children().filter(self.model.id == company_id).first()

    def get_all_with_children(self) -> List[Company]:
        """
        Get all companies in insertion order with their children eagerly loaded.

        Returns:
            List of all companies
        """
        return self._with_children().order_by(self.model.id).all()

    def delete_company(self, company_id: int) -> None:
        """
        Delete a company; its employees and profile go with it.

        Args:
            company_id: Company ID

        Raises:
            NotFoundError: If no company has this ID
        """
        if not self.delete_by_id(company_id):
            raise NotFoundError("Company", company_id)

    def count_employees(self, company_id: Optional[int] = None) -> int:
        """
        Count employee rows, optionally for a single company.

        Args:
            company_id: Restrict the count to this company

        Returns:
            Number of employees
        """
        query = self.db.query(Employee)
        if company_id is not None:
            query = query.filter(Employee.company_id == company_id)
        return query.count()

    def count_profiles(self) -> int:
        """Count profile rows across all companies."""
        return self.db.query(Profile).count()
