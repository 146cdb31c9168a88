"""
Use cases: Identity-document type lookup.

Read-only. Failure cases: DocumentTypeNotFoundError, DataAccessError.
"""

import logging

from beneficiaries_api.domain.registry.entities import DocumentType
from beneficiaries_api.domain.registry.errors import DocumentTypeNotFoundError
from beneficiaries_api.domain.registry.ports import DocumentTypeRepository

logger = logging.getLogger(__name__)


class ListDocumentTypesUseCase:
    """Returns the active identity-document types."""

    def __init__(self, document_type_repo: DocumentTypeRepository) -> None:
        self._document_type_repo = document_type_repo

    def execute(self) -> list[DocumentType]:
        logger.info("Listing document types")
        return self._document_type_repo.list_all()


class GetDocumentTypeUseCase:
    """Looks up one identity-document type."""

    def __init__(self, document_type_repo: DocumentTypeRepository) -> None:
        self._document_type_repo = document_type_repo

    def execute(self, document_type_id: int) -> DocumentType:
        """Run the get document type use case.

        Raises:
            DocumentTypeNotFoundError: If no document type has this id.
        """
        logger.info("Retrieving document type id=%d", document_type_id)

        document_type = self._document_type_repo.get_by_id(document_type_id)
        if document_type is None:
            raise DocumentTypeNotFoundError(document_type_id)
        return document_type
