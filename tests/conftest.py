"""
Shared fixtures for the test suite.

The registry database is never touched: the stored-procedure
repositories are swapped for in-memory fakes through FastAPI
dependency overrides. The fakes record every call so tests can
assert that invalid requests never reach the data layer.
"""

import os

# The module-level app in beneficiaries_api.main needs a connection string.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from dataclasses import asdict, replace
from datetime import date, datetime
from typing import Optional

import pytest
from fastapi.testclient import TestClient

from beneficiaries_api.core.config import Settings
from beneficiaries_api.domain.registry.entities import (
    Beneficiary,
    BeneficiaryData,
    DocumentType,
)
from beneficiaries_api.domain.registry.errors import BeneficiaryNotFoundError
from beneficiaries_api.domain.registry.ports import (
    BeneficiaryRepository,
    DocumentTypeRepository,
)
from beneficiaries_api.interfaces.registry.dependencies import (
    get_beneficiary_repository,
    get_document_type_repository,
)
from beneficiaries_api.main import create_app

DNI = DocumentType(id=1, name="Documento Nacional de Identidad", abbreviation="DNI", country="Peru")
PASSPORT = DocumentType(id=2, name="Pasaporte", abbreviation="PAS", country="Peru")


class FakeBeneficiaryRepository(BeneficiaryRepository):
    """In-memory stand-in for the beneficiary stored procedures.

    Attributes:
        calls: Names of the repository methods invoked, in order.
        failures: Method name -> exception to raise instead of running.
        delete_result / restore_result: Force the procedure's scalar
            result (1 or 0) instead of computing it from state.
    """

    def __init__(self) -> None:
        self.rows: dict[int, Beneficiary] = {}
        self.calls: list[str] = []
        self.failures: dict[str, Exception] = {}
        self.delete_result: Optional[int] = None
        self.restore_result: Optional[int] = None
        self._next_id = 1

    def _record(self, name: str) -> None:
        self.calls.append(name)
        if name in self.failures:
            raise self.failures[name]

    def _missing(self, beneficiary_id: int) -> BeneficiaryNotFoundError:
        return BeneficiaryNotFoundError(
            beneficiary_id, f"El beneficiario con Id {beneficiary_id} no existe"
        )

    def list_all(self) -> list[Beneficiary]:
        self._record("list_all")
        return list(self.rows.values())

    def list_active(self) -> list[Beneficiary]:
        self._record("list_active")
        return [b for b in self.rows.values() if b.active]

    def list_inactive(self) -> list[Beneficiary]:
        self._record("list_inactive")
        return [b for b in self.rows.values() if not b.active]

    def get_by_id(self, beneficiary_id: int) -> Optional[Beneficiary]:
        self._record("get_by_id")
        return self.rows.get(beneficiary_id)

    def create(self, data: BeneficiaryData) -> Beneficiary:
        self._record("create")
        document_type = {DNI.id: DNI, PASSPORT.id: PASSPORT}.get(data.document_type_id)
        beneficiary = Beneficiary(
            id=self._next_id,
            active=True,
            created_at=datetime.now(),
            document_type_name=document_type.name if document_type else None,
            document_type_abbreviation=document_type.abbreviation if document_type else None,
            country=document_type.country if document_type else None,
            **asdict(data),
        )
        self.rows[beneficiary.id] = beneficiary
        self._next_id += 1
        return beneficiary

    def update(self, beneficiary_id: int, data: BeneficiaryData) -> Beneficiary:
        self._record("update")
        if beneficiary_id not in self.rows:
            raise self._missing(beneficiary_id)
        updated = replace(self.rows[beneficiary_id], updated_at=datetime.now(), **asdict(data))
        self.rows[beneficiary_id] = updated
        return updated

    def delete(self, beneficiary_id: int) -> bool:
        self._record("delete")
        return self._set_active(beneficiary_id, False, self.delete_result)

    def restore(self, beneficiary_id: int) -> bool:
        self._record("restore")
        return self._set_active(beneficiary_id, True, self.restore_result)

    def _set_active(self, beneficiary_id: int, active: bool, forced: Optional[int]) -> bool:
        if forced is not None:
            return forced == 1
        if beneficiary_id not in self.rows:
            return False
        self.rows[beneficiary_id] = replace(self.rows[beneficiary_id], active=active)
        return True


class FakeDocumentTypeRepository(DocumentTypeRepository):
    """In-memory stand-in for the document type stored procedures."""

    def __init__(self, document_types: list[DocumentType]) -> None:
        self.document_types = {d.id: d for d in document_types}
        self.failures: dict[str, Exception] = {}

    def list_all(self) -> list[DocumentType]:
        if "list_all" in self.failures:
            raise self.failures["list_all"]
        return list(self.document_types.values())

    def get_by_id(self, document_type_id: int) -> Optional[DocumentType]:
        if "get_by_id" in self.failures:
            raise self.failures["get_by_id"]
        return self.document_types.get(document_type_id)


def make_settings(**overrides) -> Settings:
    """Settings isolated from the developer's .env file."""
    values = {"database_url": "sqlite://", "rate_limit_enabled": False}
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_beneficiary(**overrides) -> Beneficiary:
    values = dict(
        id=1,
        names="Ana",
        surnames="Lopez",
        document_type_id=1,
        document_number="12345678",
        birth_date=date(1990, 1, 1),
        sex="F",
        active=True,
        created_at=datetime(2024, 5, 1, 10, 30),
    )
    values.update(overrides)
    return Beneficiary(**values)


@pytest.fixture
def valid_payload() -> dict:
    return {
        "names": "Ana",
        "surnames": "Lopez",
        "documentTypeId": 1,
        "documentNumber": "12345678",
        "birthDate": "1990-01-01",
        "sex": "F",
    }


@pytest.fixture
def beneficiary_repo() -> FakeBeneficiaryRepository:
    return FakeBeneficiaryRepository()


@pytest.fixture
def document_type_repo() -> FakeDocumentTypeRepository:
    return FakeDocumentTypeRepository([DNI, PASSPORT])


@pytest.fixture
def app(beneficiary_repo, document_type_repo):
    application = create_app(make_settings())
    application.dependency_overrides[get_beneficiary_repository] = lambda: beneficiary_repo
    application.dependency_overrides[get_document_type_repository] = lambda: document_type_repo
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
