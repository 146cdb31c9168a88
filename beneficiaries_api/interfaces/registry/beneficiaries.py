"""
FastAPI router for the beneficiary resource.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas.
Error mapping is handled by centralized error handlers.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request, Response, status

from beneficiaries_api.application.registry.change_beneficiary_status import (
    DeleteBeneficiaryUseCase,
    RestoreBeneficiaryUseCase,
)
from beneficiaries_api.application.registry.create_beneficiary import (
    CreateBeneficiaryUseCase,
)
from beneficiaries_api.application.registry.dtos import (
    CreateBeneficiaryCommand,
    ListBeneficiariesQuery,
    UpdateBeneficiaryCommand,
)
from beneficiaries_api.application.registry.get_beneficiary import GetBeneficiaryUseCase
from beneficiaries_api.application.registry.list_beneficiaries import (
    ListBeneficiariesUseCase,
)
from beneficiaries_api.application.registry.update_beneficiary import (
    UpdateBeneficiaryUseCase,
)
from beneficiaries_api.domain.registry.entities import BeneficiaryStatus
from beneficiaries_api.interfaces.registry.dependencies import (
    get_beneficiary_use_case,
    get_create_beneficiary_use_case,
    get_delete_beneficiary_use_case,
    get_list_beneficiaries_use_case,
    get_restore_beneficiary_use_case,
    get_update_beneficiary_use_case,
)
from beneficiaries_api.interfaces.registry.schemas import (
    BeneficiaryResponse,
    CreateBeneficiaryRequest,
    ErrorResponse,
    MessageResponse,
    UpdateBeneficiaryRequest,
    ValidationErrorResponse,
)

router = APIRouter(prefix="/beneficiaries", tags=["beneficiaries"])

_NOT_FOUND = {404: {"model": ErrorResponse}}
_SERVER_ERROR = {500: {"model": ErrorResponse}}
_INVALID = {400: {"model": ValidationErrorResponse}}


def _to_response(beneficiaries) -> list[BeneficiaryResponse]:
    return [BeneficiaryResponse.model_validate(b) for b in beneficiaries]


@router.get(
    "",
    response_model=list[BeneficiaryResponse],
    responses={**_SERVER_ERROR},
    summary="List beneficiaries",
    description=(
        "List every beneficiary. Pass onlyActive=true for active ones only, "
        "onlyActive=false for soft-deleted ones only."
    ),
)
def list_beneficiaries(
    only_active: Optional[bool] = Query(
        default=None, alias="onlyActive", description="Filter by active flag"
    ),
    use_case: ListBeneficiariesUseCase = Depends(get_list_beneficiaries_use_case),
) -> list[BeneficiaryResponse]:
    """List beneficiaries, optionally filtered by active flag."""
    if only_active is None:
        beneficiary_status = BeneficiaryStatus.ALL
    elif only_active:
        beneficiary_status = BeneficiaryStatus.ACTIVE
    else:
        beneficiary_status = BeneficiaryStatus.INACTIVE
    return _to_response(use_case.execute(ListBeneficiariesQuery(status=beneficiary_status)))


@router.get(
    "/active",
    response_model=list[BeneficiaryResponse],
    responses={**_SERVER_ERROR},
    summary="List active beneficiaries",
)
def list_active_beneficiaries(
    use_case: ListBeneficiariesUseCase = Depends(get_list_beneficiaries_use_case),
) -> list[BeneficiaryResponse]:
    """List beneficiaries whose active flag is set."""
    query = ListBeneficiariesQuery(status=BeneficiaryStatus.ACTIVE)
    return _to_response(use_case.execute(query))


@router.get(
    "/inactive",
    response_model=list[BeneficiaryResponse],
    responses={**_SERVER_ERROR},
    summary="List inactive beneficiaries",
)
def list_inactive_beneficiaries(
    use_case: ListBeneficiariesUseCase = Depends(get_list_beneficiaries_use_case),
) -> list[BeneficiaryResponse]:
    """List soft-deleted beneficiaries."""
    query = ListBeneficiariesQuery(status=BeneficiaryStatus.INACTIVE)
    return _to_response(use_case.execute(query))


@router.get(
    "/{beneficiary_id}",
    response_model=BeneficiaryResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Get a beneficiary",
)
def get_beneficiary(
    beneficiary_id: int,
    use_case: GetBeneficiaryUseCase = Depends(get_beneficiary_use_case),
) -> BeneficiaryResponse:
    """Get a beneficiary by id."""
    return BeneficiaryResponse.model_validate(use_case.execute(beneficiary_id))


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    response_model=BeneficiaryResponse,
    responses={**_INVALID, **_SERVER_ERROR},
    summary="Enroll a beneficiary",
    description="Create a beneficiary. The Location header points at the new record.",
)
def create_beneficiary(
    payload: CreateBeneficiaryRequest,
    request: Request,
    response: Response,
    use_case: CreateBeneficiaryUseCase = Depends(get_create_beneficiary_use_case),
) -> BeneficiaryResponse:
    """Create a beneficiary and point the client at it."""
    command = CreateBeneficiaryCommand(
        names=payload.names,
        surnames=payload.surnames,
        document_type_id=payload.document_type_id,
        document_number=payload.document_number,
        birth_date=payload.birth_date,
        sex=payload.sex,
    )
    beneficiary = use_case.execute(command)
    response.headers["Location"] = str(
        request.url_for("get_beneficiary", beneficiary_id=beneficiary.id)
    )
    return BeneficiaryResponse.model_validate(beneficiary)


@router.put(
    "/{beneficiary_id}",
    response_model=BeneficiaryResponse,
    responses={**_INVALID, **_NOT_FOUND, **_SERVER_ERROR},
    summary="Update a beneficiary",
)
def update_beneficiary(
    beneficiary_id: int,
    payload: UpdateBeneficiaryRequest,
    use_case: UpdateBeneficiaryUseCase = Depends(get_update_beneficiary_use_case),
) -> BeneficiaryResponse:
    """Overwrite a beneficiary's writable fields."""
    command = UpdateBeneficiaryCommand(
        beneficiary_id=beneficiary_id,
        names=payload.names,
        surnames=payload.surnames,
        document_type_id=payload.document_type_id,
        document_number=payload.document_number,
        birth_date=payload.birth_date,
        sex=payload.sex,
    )
    return BeneficiaryResponse.model_validate(use_case.execute(command))


@router.delete(
    "/{beneficiary_id}",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Delete a beneficiary (soft delete)",
)
def delete_beneficiary(
    beneficiary_id: int,
    use_case: DeleteBeneficiaryUseCase = Depends(get_delete_beneficiary_use_case),
) -> MessageResponse:
    """Deactivate a beneficiary. The record can be restored later."""
    use_case.execute(beneficiary_id)
    return MessageResponse(message="Beneficiary deleted successfully")


@router.patch(
    "/{beneficiary_id}/restore",
    response_model=MessageResponse,
    responses={**_NOT_FOUND, **_SERVER_ERROR},
    summary="Restore a deleted beneficiary",
)
def restore_beneficiary(
    beneficiary_id: int,
    use_case: RestoreBeneficiaryUseCase = Depends(get_restore_beneficiary_use_case),
) -> MessageResponse:
    """Reactivate a soft-deleted beneficiary."""
    use_case.execute(beneficiary_id)
    return MessageResponse(message="Beneficiary restored successfully")
