"""
Domain entities for the registry bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Optional


class BeneficiaryStatus(Enum):
    """Soft-delete state used to select which beneficiaries to list."""

    ALL = "all"
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class DocumentType:
    """A kind of identity document and the country that issues it."""

    id: int
    name: str
    abbreviation: str
    country: str


@dataclass(frozen=True)
class BeneficiaryData:
    """The writable fields of a beneficiary, shared by create and update."""

    names: str
    surnames: str
    document_type_id: int
    document_number: str
    birth_date: date
    sex: str


@dataclass(frozen=True)
class Beneficiary:
    """A person enrolled in a social program.

    The document type name, abbreviation and country are denormalized
    by the database and never written from this side.
    """

    id: int
    names: str
    surnames: str
    document_type_id: int
    document_number: str
    birth_date: date
    sex: str
    active: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    document_type_name: Optional[str] = None
    document_type_abbreviation: Optional[str] = None
    country: Optional[str] = None
