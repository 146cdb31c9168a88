"""
Dependency injection for the registry bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into use cases via constructor injection.
Tests override the repository dependencies with in-memory fakes.
"""

from fastapi import Depends, Request

from beneficiaries_api.application.registry.change_beneficiary_status import (
    DeleteBeneficiaryUseCase,
    RestoreBeneficiaryUseCase,
)
from beneficiaries_api.application.registry.create_beneficiary import (
    CreateBeneficiaryUseCase,
)
from beneficiaries_api.application.registry.document_types import (
    GetDocumentTypeUseCase,
    ListDocumentTypesUseCase,
)
from beneficiaries_api.application.registry.get_beneficiary import GetBeneficiaryUseCase
from beneficiaries_api.application.registry.list_beneficiaries import (
    ListBeneficiariesUseCase,
)
from beneficiaries_api.application.registry.update_beneficiary import (
    UpdateBeneficiaryUseCase,
)
from beneficiaries_api.domain.registry.ports import (
    BeneficiaryRepository,
    DocumentTypeRepository,
)
from beneficiaries_api.infrastructure.database import ConnectionProvider
from beneficiaries_api.infrastructure.registry.beneficiary_repository import (
    BeneficiaryRepositoryAdapter,
)
from beneficiaries_api.infrastructure.registry.document_type_repository import (
    DocumentTypeRepositoryAdapter,
)


def get_connection_provider(request: Request) -> ConnectionProvider:
    """Return the process-wide connection provider built at startup."""
    return request.app.state.connection_provider


def get_beneficiary_repository(
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> BeneficiaryRepository:
    """Build the stored-procedure beneficiary repository."""
    return BeneficiaryRepositoryAdapter(provider)


def get_document_type_repository(
    provider: ConnectionProvider = Depends(get_connection_provider),
) -> DocumentTypeRepository:
    """Build the stored-procedure document type repository."""
    return DocumentTypeRepositoryAdapter(provider)


def get_list_beneficiaries_use_case(
    repo: BeneficiaryRepository = Depends(get_beneficiary_repository),
) -> ListBeneficiariesUseCase:
    return ListBeneficiariesUseCase(beneficiary_repo=repo)


def get_beneficiary_use_case(
    repo: BeneficiaryRepository = Depends(get_beneficiary_repository),
) -> GetBeneficiaryUseCase:
    return GetBeneficiaryUseCase(beneficiary_repo=repo)


def get_create_beneficiary_use_case(
    repo: BeneficiaryRepository = Depends(get_beneficiary_repository),
) -> CreateBeneficiaryUseCase:
    return CreateBeneficiaryUseCase(beneficiary_repo=repo)


def get_update_beneficiary_use_case(
    repo: BeneficiaryRepository = Depends(get_beneficiary_repository),
) -> UpdateBeneficiaryUseCase:
    return UpdateBeneficiaryUseCase(beneficiary_repo=repo)


def get_delete_beneficiary_use_case(
    repo: BeneficiaryRepository = Depends(get_beneficiary_repository),
) -> DeleteBeneficiaryUseCase:
    return DeleteBeneficiaryUseCase(beneficiary_repo=repo)


def get_restore_beneficiary_use_case(
    repo: BeneficiaryRepository = Depends(get_beneficiary_repository),
) -> RestoreBeneficiaryUseCase:
    return RestoreBeneficiaryUseCase(beneficiary_repo=repo)


def get_list_document_types_use_case(
    repo: DocumentTypeRepository = Depends(get_document_type_repository),
) -> ListDocumentTypesUseCase:
    return ListDocumentTypesUseCase(document_type_repo=repo)


def get_document_type_use_case(
    repo: DocumentTypeRepository = Depends(get_document_type_repository),
) -> GetDocumentTypeUseCase:
    return GetDocumentTypeUseCase(document_type_repo=repo)
