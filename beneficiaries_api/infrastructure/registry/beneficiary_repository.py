"""
Adapter: Beneficiary repository.

Implements BeneficiaryRepository port.
Every operation invokes exactly one stored procedure of the registry
database on its own connection. Filtering by active flag, soft-delete
and restore semantics all live in the procedures.
"""

import logging
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Iterator, Mapping, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError

from beneficiaries_api.domain.registry.entities import Beneficiary, BeneficiaryData
from beneficiaries_api.domain.registry.errors import (
    BeneficiaryNotFoundError,
    UnexpectedResultError,
)
from beneficiaries_api.domain.registry.ports import BeneficiaryRepository
from beneficiaries_api.infrastructure.database import (
    ConnectionProvider,
    data_access,
    database_message,
    is_missing_record_error,
    procedure_call,
)

logger = logging.getLogger(__name__)

PROC_LIST_ALL = "sp_ListarTodosBeneficiarios"
PROC_LIST_ACTIVE = "sp_ListarBeneficiariosActivos"
PROC_LIST_INACTIVE = "sp_ListarBeneficiariosInactivos"
PROC_GET = "sp_ObtenerBeneficiario"
PROC_CREATE = "sp_CrearBeneficiario"
PROC_UPDATE = "sp_ActualizarBeneficiario"
PROC_DELETE = "sp_EliminarBeneficiario"
PROC_RESTORE = "sp_RestaurarBeneficiario"

ID_PARAM = "Id"
WRITE_PARAMS = (
    "Nombres",
    "Apellidos",
    "DocumentoIdentidadId",
    "NumeroDocumento",
    "FechaNacimiento",
    "Sexo",
)


class BeneficiaryRepositoryAdapter(BeneficiaryRepository):
    """Stored-procedure implementation of the beneficiary repository.

    Reads run on a plain connection; writes run inside a transaction
    that commits when the procedure returns.
    """

    def __init__(self, provider: ConnectionProvider) -> None:
        self._provider = provider

    def list_all(self) -> list[Beneficiary]:
        """Return every beneficiary regardless of its active flag."""
        return self._fetch_all("list_beneficiaries", PROC_LIST_ALL)

    def list_active(self) -> list[Beneficiary]:
        """Return active beneficiaries, as filtered by the procedure."""
        return self._fetch_all("list_active_beneficiaries", PROC_LIST_ACTIVE)

    def list_inactive(self) -> list[Beneficiary]:
        """Return soft-deleted beneficiaries, as filtered by the procedure."""
        return self._fetch_all("list_inactive_beneficiaries", PROC_LIST_INACTIVE)

    def get_by_id(self, beneficiary_id: int) -> Optional[Beneficiary]:
        """Return a beneficiary by its ID, or None if no row matches.

        Args:
            beneficiary_id: Database id of the beneficiary.

        Returns:
            Beneficiary entity or None.
        """
        with data_access("get_beneficiary", beneficiary_id):
            with self._provider.connect() as conn:
                row = (
                    conn.execute(self._call(PROC_GET, (ID_PARAM,)), {ID_PARAM: beneficiary_id})
                    .mappings()
                    .first()
                )
        return _to_beneficiary(row) if row is not None else None

    def create(self, data: BeneficiaryData) -> Beneficiary:
        """Create a beneficiary and return the row the procedure produced.

        Args:
            data: The writable fields of the new beneficiary.

        Returns:
            The stored beneficiary, with its server-assigned id and timestamps.

        Raises:
            UnexpectedResultError: If the procedure returns no row.
            DataAccessError: If the database rejects the call.
        """
        with data_access("create_beneficiary"):
            with self._provider.transaction() as conn:
                row = (
                    conn.execute(self._call(PROC_CREATE, WRITE_PARAMS), _write_values(data))
                    .mappings()
                    .first()
                )
        if row is None:
            raise UnexpectedResultError("create_beneficiary")
        return _to_beneficiary(row)

    def update(self, beneficiary_id: int, data: BeneficiaryData) -> Beneficiary:
        """Overwrite a beneficiary's writable fields.

        The procedure reports an unknown id by raising an error whose
        message contains a missing-record marker; that error surfaces
        here as BeneficiaryNotFoundError.

        Raises:
            BeneficiaryNotFoundError: If the database reports the id missing.
            UnexpectedResultError: If the procedure returns no row.
            DataAccessError: On any other database failure.
        """
        params = {ID_PARAM: beneficiary_id, **_write_values(data)}
        with data_access("update_beneficiary", beneficiary_id), _missing_as_not_found(
            beneficiary_id
        ):
            with self._provider.transaction() as conn:
                row = (
                    conn.execute(self._call(PROC_UPDATE, (ID_PARAM, *WRITE_PARAMS)), params)
                    .mappings()
                    .first()
                )
        if row is None:
            raise UnexpectedResultError("update_beneficiary", beneficiary_id)
        return _to_beneficiary(row)

    def delete(self, beneficiary_id: int) -> bool:
        """Soft-delete a beneficiary. True iff the procedure returned 1."""
        return self._toggle("delete_beneficiary", PROC_DELETE, beneficiary_id)

    def restore(self, beneficiary_id: int) -> bool:
        """Reactivate a beneficiary. True iff the procedure returned 1."""
        return self._toggle("restore_beneficiary", PROC_RESTORE, beneficiary_id)

    def _toggle(self, operation: str, procedure: str, beneficiary_id: int) -> bool:
        with data_access(operation, beneficiary_id), _missing_as_not_found(beneficiary_id):
            with self._provider.transaction() as conn:
                result = conn.execute(
                    self._call(procedure, (ID_PARAM,)), {ID_PARAM: beneficiary_id}
                ).scalar()
        logger.debug("%s(id=%d) returned %r", procedure, beneficiary_id, result)
        return result == 1

    def _fetch_all(self, operation: str, procedure: str) -> list[Beneficiary]:
        with data_access(operation):
            with self._provider.connect() as conn:
                rows = conn.execute(self._call(procedure)).mappings().all()
        return [_to_beneficiary(row) for row in rows]

    def _call(self, procedure: str, params: Sequence[str] = ()):
        return procedure_call(procedure, params, self._provider.dialect_name)


@contextmanager
def _missing_as_not_found(beneficiary_id: int) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        if is_missing_record_error(exc):
            raise BeneficiaryNotFoundError(beneficiary_id, database_message(exc)) from exc
        raise


def _write_values(data: BeneficiaryData) -> dict[str, Any]:
    return {
        "Nombres": data.names,
        "Apellidos": data.surnames,
        "DocumentoIdentidadId": data.document_type_id,
        "NumeroDocumento": data.document_number,
        "FechaNacimiento": data.birth_date,
        "Sexo": data.sex,
    }


def _as_date(value: Any) -> date:
    # DATETIME columns come back as datetime
    if isinstance(value, datetime):
        return value.date()
    return value


def _to_beneficiary(row: Mapping[str, Any]) -> Beneficiary:
    return Beneficiary(
        id=row["Id"],
        names=row["Nombres"],
        surnames=row["Apellidos"],
        document_type_id=row["DocumentoIdentidadId"],
        document_number=row["NumeroDocumento"],
        birth_date=_as_date(row["FechaNacimiento"]),
        sex=str(row["Sexo"]).strip(),
        active=bool(row["Activo"]),
        created_at=row["FechaCreacion"],
        updated_at=row.get("FechaModificacion"),
        document_type_name=row.get("TipoDocumento"),
        document_type_abbreviation=row.get("AbreviaturaDocumento"),
        country=row.get("Pais"),
    )
