"""
Use cases: Soft-delete and restore a beneficiary.

Input: beneficiary id
Output: None
Side effects: The beneficiary's active flag is flipped by the procedure.
Failure cases: BeneficiaryNotFoundError, DataAccessError.

Whether restoring an already-active beneficiary succeeds is decided
by the restore procedure; a result other than 1 is reported as
not found.
"""

import logging

from beneficiaries_api.domain.registry.errors import BeneficiaryNotFoundError
from beneficiaries_api.domain.registry.ports import BeneficiaryRepository

logger = logging.getLogger(__name__)


class DeleteBeneficiaryUseCase:
    """Deactivates a beneficiary (soft delete)."""

    def __init__(self, beneficiary_repo: BeneficiaryRepository) -> None:
        self._beneficiary_repo = beneficiary_repo

    def execute(self, beneficiary_id: int) -> None:
        """Run the delete beneficiary use case.

        Raises:
            BeneficiaryNotFoundError: If the procedure did not deactivate a row.
        """
        logger.info("Deleting beneficiary id=%d", beneficiary_id)

        if not self._beneficiary_repo.delete(beneficiary_id):
            raise BeneficiaryNotFoundError(beneficiary_id)


class RestoreBeneficiaryUseCase:
    """Reactivates a soft-deleted beneficiary."""

    def __init__(self, beneficiary_repo: BeneficiaryRepository) -> None:
        self._beneficiary_repo = beneficiary_repo

    def execute(self, beneficiary_id: int) -> None:
        """Run the restore beneficiary use case.

        Raises:
            BeneficiaryNotFoundError: If the procedure did not reactivate a row.
        """
        logger.info("Restoring beneficiary id=%d", beneficiary_id)

        if not self._beneficiary_repo.restore(beneficiary_id):
            raise BeneficiaryNotFoundError(beneficiary_id)
