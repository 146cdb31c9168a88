"""
FastAPI router for the identity-document type lookup.

Read-only. All routes delegate to use cases.
"""

from fastapi import APIRouter, Depends

from beneficiaries_api.application.registry.document_types import (
    GetDocumentTypeUseCase,
    ListDocumentTypesUseCase,
)
from beneficiaries_api.interfaces.registry.dependencies import (
    get_document_type_use_case,
    get_list_document_types_use_case,
)
from beneficiaries_api.interfaces.registry.schemas import (
    DocumentTypeResponse,
    ErrorResponse,
)

router = APIRouter(prefix="/document-types", tags=["document-types"])


@router.get(
    "",
    response_model=list[DocumentTypeResponse],
    responses={500: {"model": ErrorResponse}},
    summary="List document types",
    description="List the active identity-document types.",
)
def list_document_types(
    use_case: ListDocumentTypesUseCase = Depends(get_list_document_types_use_case),
) -> list[DocumentTypeResponse]:
    """List the active identity-document types."""
    return [DocumentTypeResponse.model_validate(d) for d in use_case.execute()]


@router.get(
    "/{document_type_id}",
    response_model=DocumentTypeResponse,
    responses={404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Get a document type",
)
def get_document_type(
    document_type_id: int,
    use_case: GetDocumentTypeUseCase = Depends(get_document_type_use_case),
) -> DocumentTypeResponse:
    """Get an identity-document type by id."""
    return DocumentTypeResponse.model_validate(use_case.execute(document_type_id))
