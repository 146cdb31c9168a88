"""
Use case: Update an existing beneficiary.

Input: UpdateBeneficiaryCommand
Output: Beneficiary (with refreshed modification timestamp)
Side effects: One row updated by the update procedure.
Failure cases: BeneficiaryNotFoundError, UnexpectedResultError, DataAccessError.
"""

import logging

from beneficiaries_api.application.registry.dtos import UpdateBeneficiaryCommand
from beneficiaries_api.domain.registry.entities import Beneficiary, BeneficiaryData
from beneficiaries_api.domain.registry.ports import BeneficiaryRepository

logger = logging.getLogger(__name__)


class UpdateBeneficiaryUseCase:
    """Overwrites a beneficiary's writable fields.

    Existence is not checked up front: the update procedure reports an
    unknown id and the repository raises BeneficiaryNotFoundError.
    """

    def __init__(self, beneficiary_repo: BeneficiaryRepository) -> None:
        self._beneficiary_repo = beneficiary_repo

    def execute(self, command: UpdateBeneficiaryCommand) -> Beneficiary:
        """Run the update beneficiary use case."""
        logger.info("Updating beneficiary id=%d", command.beneficiary_id)

        data = BeneficiaryData(
            names=command.names,
            surnames=command.surnames,
            document_type_id=command.document_type_id,
            document_number=command.document_number,
            birth_date=command.birth_date,
            sex=command.sex,
        )
        return self._beneficiary_repo.update(command.beneficiary_id, data)
