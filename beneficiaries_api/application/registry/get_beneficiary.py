"""
Use case: Retrieve a single beneficiary.

Input: beneficiary id
Output: Beneficiary
Side effects: None (read-only query).
Failure cases: BeneficiaryNotFoundError, DataAccessError.
"""

import logging

from beneficiaries_api.domain.registry.entities import Beneficiary
from beneficiaries_api.domain.registry.errors import BeneficiaryNotFoundError
from beneficiaries_api.domain.registry.ports import BeneficiaryRepository

logger = logging.getLogger(__name__)


class GetBeneficiaryUseCase:
    """Looks up one beneficiary and turns an absent row into an error."""

    def __init__(self, beneficiary_repo: BeneficiaryRepository) -> None:
        self._beneficiary_repo = beneficiary_repo

    def execute(self, beneficiary_id: int) -> Beneficiary:
        """Run the get beneficiary use case.

        Raises:
            BeneficiaryNotFoundError: If no beneficiary has this id.
        """
        logger.info("Retrieving beneficiary id=%d", beneficiary_id)

        beneficiary = self._beneficiary_repo.get_by_id(beneficiary_id)
        if beneficiary is None:
            raise BeneficiaryNotFoundError(beneficiary_id)
        return beneficiary
