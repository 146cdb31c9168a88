"""
Pydantic schemas for registry API request/response validation.

These schemas enforce input validation and define the API contract.
JSON field names are camelCase; Python attributes stay snake_case.
No business logic belongs here.
"""

from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

NAME_MAX_LEN = 100
DOCUMENT_NUMBER_MAX_LEN = 20
SEX_PATTERN = r"^[MF]$"


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BeneficiaryRequest(CamelModel):
    """Writable beneficiary fields, shared by create and update.

    Attributes:
        names: Given names (1-100 chars).
        surnames: Family names (1-100 chars).
        document_type_id: Id of an identity-document type.
        document_number: Document number (1-20 chars).
        birth_date: Date of birth (ISO 8601).
        sex: "M" or "F".

    Surrounding whitespace is stripped before the length checks, so
    blank values count as missing.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    names: str = Field(..., min_length=1, max_length=NAME_MAX_LEN, description="Given names")
    surnames: str = Field(
        ..., min_length=1, max_length=NAME_MAX_LEN, description="Family names"
    )
    document_type_id: int = Field(..., description="Identity-document type id")
    document_number: str = Field(
        ...,
        min_length=1,
        max_length=DOCUMENT_NUMBER_MAX_LEN,
        description="Identity document number",
    )
    birth_date: date = Field(..., description="Date of birth")
    sex: str = Field(..., pattern=SEX_PATTERN, description="M or F")


class CreateBeneficiaryRequest(BeneficiaryRequest):
    """Request schema for enrolling a beneficiary."""


class UpdateBeneficiaryRequest(BeneficiaryRequest):
    """Request schema for updating a beneficiary."""


class BeneficiaryResponse(CamelModel):
    """A beneficiary as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    names: str
    surnames: str
    document_type_id: int
    document_type_name: str | None = None
    document_type_abbreviation: str | None = None
    country: str | None = None
    document_number: str
    birth_date: date
    sex: str
    active: bool
    created_at: datetime
    updated_at: datetime | None = None


class DocumentTypeResponse(CamelModel):
    """An identity-document type as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    abbreviation: str
    country: str


class MessageResponse(BaseModel):
    """Confirmation message for state-changing operations."""

    message: str


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
    database: str


class ErrorResponse(BaseModel):
    """Standard error response returned by all error handlers."""

    error: str
    detail: str | None = None


class ValidationErrorResponse(BaseModel):
    """Error response listing every invalid field and its messages."""

    error: str
    errors: dict[str, list[str]]
