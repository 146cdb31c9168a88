"""
Domain-specific errors for the registry bounded context.

All errors raised from the domain and data layers must be defined here.
These are mapped to HTTP responses at the interface layer.
No framework imports allowed.
"""

from typing import Optional


class RegistryDomainError(Exception):
    """Base error for all registry domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BeneficiaryNotFoundError(RegistryDomainError):
    """Raised when a beneficiary does not exist.

    When the database itself reported the missing record, its message
    is kept so it can be returned to the client verbatim.
    """

    def __init__(self, beneficiary_id: int, message: Optional[str] = None) -> None:
        super().__init__(message or "Beneficiary not found")
        self.beneficiary_id = beneficiary_id


class DocumentTypeNotFoundError(RegistryDomainError):
    """Raised when an identity-document type does not exist."""

    def __init__(self, document_type_id: int) -> None:
        super().__init__("Document type not found")
        self.document_type_id = document_type_id


class UnexpectedResultError(RegistryDomainError):
    """Raised when a stored procedure returns no row where one is required."""

    def __init__(self, operation: str, entity_id: Optional[int] = None) -> None:
        super().__init__(f"Stored procedure returned no result for {operation}")
        self.operation = operation
        self.entity_id = entity_id


class DataAccessError(RegistryDomainError):
    """Raised when the database rejects or fails a stored-procedure call.

    Attributes:
        operation: Name of the gateway operation that failed.
        reason: The database's own error text.
        entity_id: Id of the affected record, if any.
    """

    def __init__(
        self, operation: str, reason: str, entity_id: Optional[int] = None
    ) -> None:
        super().__init__(f"{operation} failed: {reason}")
        self.operation = operation
        self.reason = reason
        self.entity_id = entity_id
