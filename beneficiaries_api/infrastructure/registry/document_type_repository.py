"""
Adapter: Identity-document type repository.

Implements DocumentTypeRepository port.
Read-only lookup over two stored procedures.
"""

from typing import Any, Mapping, Optional

from beneficiaries_api.domain.registry.entities import DocumentType
from beneficiaries_api.domain.registry.ports import DocumentTypeRepository
from beneficiaries_api.infrastructure.database import (
    ConnectionProvider,
    data_access,
    procedure_call,
)

PROC_LIST = "sp_ListarDocumentosIdentidad"
PROC_GET = "sp_ObtenerDocumentoIdentidad"


class DocumentTypeRepositoryAdapter(DocumentTypeRepository):
    """Stored-procedure implementation of the document type lookup."""

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    def list_all(self) -> list[DocumentType]:
        """Return the document types the procedure reports as active."""
        statement = procedure_call(PROC_LIST, dialect=self._provider.dialect_name)
        with data_access("list_document_types"):
            with self._provider.connect() as conn:
                rows = conn.execute(statement).mappings().all()
        return [_to_document_type(row) for row in rows]

    def get_by_id(self, document_type_id: int) -> Optional[DocumentType]:
        """Return a document type by its ID, or None if no row matches."""
        statement = procedure_call(PROC_GET, ("Id",), self._provider.dialect_name)
        with data_access("get_document_type", document_type_id):
            with self._provider.connect() as conn:
                row = conn.execute(statement, {"Id": document_type_id}).mappings().first()
        return _to_document_type(row) if row is not None else None


def _to_document_type(row: Mapping[str, Any]) -> DocumentType:
    return DocumentType(
        id=row["Id"],
        name=row["Nombre"],
        abbreviation=row["Abreviatura"],
        country=row["Pais"],
    )
