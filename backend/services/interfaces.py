"""
Service Interfaces

Abstract base classes for service layer following Dependency Inversion Principle.
This allows for dependency injection and easier testing/mocking.
"""

from abc import ABC, abstractmethod
from typing import List

from dtos.request import CompanyDto
from dtos.response import CompanyResponse


class ICompanyService(ABC):
    """
    Interface for company aggregate operations.

    Each call runs in its own transaction.
    """

    @abstractmethod
    def add_company(self, dto: CompanyDto) -> int:
        """
        Create a company with its employees and profile.

        Args:
            dto: Company payload

        Returns:
            ID of the new company

        Raises:
            ValidationError: If the payload is malformed
            StorageError: If the database rejects the write
        """
        pass

    @abstractmethod
    def get_all(self) -> List[CompanyResponse]:
        """
        List every company with its employees and profile.

        Returns:
            Companies in insertion order
        """
        pass

    @abstractmethod
    def get_by_id(self, company_id: int) -> CompanyResponse:
        """
        Fetch one company.

        Raises:
            NotFoundError: If no company has this ID
        """
        pass

    @abstractmethod
    def delete_company(self, company_id: int) -> None:
        """
        Delete a company together with its employees and profile.

        Raises:
            NotFoundError: If no company has this ID
        """
        pass
