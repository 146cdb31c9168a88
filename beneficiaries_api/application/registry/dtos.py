"""
Data Transfer Objects for the registry application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import date

from beneficiaries_api.domain.registry.entities import BeneficiaryStatus


@dataclass(frozen=True)
class ListBeneficiariesQuery:
    """Input DTO for listing beneficiaries.

    Attributes:
        status: Which beneficiaries to return (all, active or inactive).
    """

    status: BeneficiaryStatus = BeneficiaryStatus.ALL


@dataclass(frozen=True)
class CreateBeneficiaryCommand:
    """Input DTO for enrolling a new beneficiary.

    Attributes:
        names: Given names.
        surnames: Family names.
        document_type_id: Id of the identity-document type.
        document_number: Identity document number.
        birth_date: Date of birth.
        sex: "M" or "F".
    """

    names: str
    surnames: str
    document_type_id: int
    document_number: str
    birth_date: date
    sex: str


@dataclass(frozen=True)
class UpdateBeneficiaryCommand:
    """Input DTO for overwriting a beneficiary's writable fields."""

    beneficiary_id: int
    names: str
    surnames: str
    document_type_id: int
    document_number: str
    birth_date: date
    sex: str
