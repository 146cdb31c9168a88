"""
Port interfaces (ABCs) for the registry bounded context.

Ports define the contracts that the application requires from the
registry database. Infrastructure adapters implement these interfaces;
tests substitute in-memory fakes.
"""

from abc import ABC, abstractmethod
from typing import Optional

from beneficiaries_api.domain.registry.entities import (
    Beneficiary,
    BeneficiaryData,
    DocumentType,
)


class BeneficiaryRepository(ABC):
    """Port for reading and mutating beneficiary records."""

    @abstractmethod
    def list_all(self) -> list[Beneficiary]:
        """Return every beneficiary regardless of its active flag."""
        raise NotImplementedError

    @abstractmethod
    def list_active(self) -> list[Beneficiary]:
        """Return beneficiaries whose active flag is set."""
        raise NotImplementedError

    @abstractmethod
    def list_inactive(self) -> list[Beneficiary]:
        """Return soft-deleted beneficiaries."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, beneficiary_id: int) -> Optional[Beneficiary]:
        """Return a beneficiary by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def create(self, data: BeneficiaryData) -> Beneficiary:
        """Create a beneficiary and return the stored record.

        Raises:
            UnexpectedResultError: If the database returns no row.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, beneficiary_id: int, data: BeneficiaryData) -> Beneficiary:
        """Overwrite a beneficiary's writable fields and return the stored record.

        Raises:
            BeneficiaryNotFoundError: If the database reports the ID missing.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, beneficiary_id: int) -> bool:
        """Soft-delete a beneficiary. Return True if a record was deactivated."""
        raise NotImplementedError

    @abstractmethod
    def restore(self, beneficiary_id: int) -> bool:
        """Reactivate a soft-deleted beneficiary. Return True on success."""
        raise NotImplementedError


class DocumentTypeRepository(ABC):
    """Port for the read-only identity-document type lookup."""

    @abstractmethod
    def list_all(self) -> list[DocumentType]:
        """Return the active document types."""
        raise NotImplementedError

    @abstractmethod
    def get_by_id(self, document_type_id: int) -> Optional[DocumentType]:
        """Return a document type by its ID, or None if not found."""
        raise NotImplementedError
