"""
Use case: List beneficiaries.

Input: ListBeneficiariesQuery (status)
Output: list[Beneficiary]
Side effects: None (read-only query).
Failure cases: DataAccessError.
"""

import logging

from beneficiaries_api.application.registry.dtos import ListBeneficiariesQuery
from beneficiaries_api.domain.registry.entities import Beneficiary, BeneficiaryStatus
from beneficiaries_api.domain.registry.ports import BeneficiaryRepository

logger = logging.getLogger(__name__)


class ListBeneficiariesUseCase:
    """Returns all, active or inactive beneficiaries.

    Filtering by active flag is done by the database; this use case
    only picks which query to run.
    """

    def __init__(self, beneficiary_repo: BeneficiaryRepository) -> None:
        self._beneficiary_repo = beneficiary_repo

    def execute(self, query: ListBeneficiariesQuery) -> list[Beneficiary]:
        """Run the list beneficiaries use case.

        Args:
            query: Which beneficiaries to list.

        Returns:
            The matching beneficiaries, possibly empty.
        """
        logger.info("Listing beneficiaries: status=%s", query.status.value)

        if query.status is BeneficiaryStatus.ACTIVE:
            return self._beneficiary_repo.list_active()
        if query.status is BeneficiaryStatus.INACTIVE:
            return self._beneficiary_repo.list_inactive()
        return self._beneficiary_repo.list_all()
