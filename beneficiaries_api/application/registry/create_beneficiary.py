"""
Use case: Enroll a new beneficiary.

Input: CreateBeneficiaryCommand
Output: Beneficiary (with server-assigned id, active flag and timestamps)
Side effects: One row inserted by the create procedure.
Failure cases: UnexpectedResultError, DataAccessError.
"""

import logging

from beneficiaries_api.application.registry.dtos import CreateBeneficiaryCommand
from beneficiaries_api.domain.registry.entities import Beneficiary, BeneficiaryData
from beneficiaries_api.domain.registry.ports import BeneficiaryRepository

logger = logging.getLogger(__name__)


class CreateBeneficiaryUseCase:
    """Creates a beneficiary through the repository.

    Field validation has already happened at the interface layer; the
    database enforces the rest.
    """

    def __init__(self, beneficiary_repo: BeneficiaryRepository) -> None:
        self._beneficiary_repo = beneficiary_repo

    def execute(self, command: CreateBeneficiaryCommand) -> Beneficiary:
        """Run the create beneficiary use case.

        Args:
            command: The new beneficiary's fields.

        Returns:
            The stored beneficiary as returned by the database.
        """
        data = BeneficiaryData(
            names=command.names,
            surnames=command.surnames,
            document_type_id=command.document_type_id,
            document_number=command.document_number,
            birth_date=command.birth_date,
            sex=command.sex,
        )

        beneficiary = self._beneficiary_repo.create(data)
        logger.info("Created beneficiary id=%d", beneficiary.id)
        return beneficiary
