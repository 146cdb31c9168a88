"""
Tests for the document type API endpoints.
"""

from beneficiaries_api.domain.registry.errors import DataAccessError

BASE = "/api/v1/document-types"


class TestDocumentTypesEndpoint:
    def test_list_document_types(self, client) -> None:
        response = client.get(BASE)

        assert response.status_code == 200
        assert response.json() == [
            {
                "id": 1,
                "name": "Documento Nacional de Identidad",
                "abbreviation": "DNI",
                "country": "Peru",
            },
            {"id": 2, "name": "Pasaporte", "abbreviation": "PAS", "country": "Peru"},
        ]

    def test_get_document_type(self, client) -> None:
        response = client.get(f"{BASE}/2")
        assert response.status_code == 200
        assert response.json()["abbreviation"] == "PAS"

    def test_unknown_document_type_returns_404(self, client) -> None:
        response = client.get(f"{BASE}/99")
        assert response.status_code == 404
        assert response.json() == {"error": "Document type not found"}

    def test_database_failure_returns_500(self, client, document_type_repo) -> None:
        """The database message is passed through as detail."""
        document_type_repo.failures["list_all"] = DataAccessError(
            "list_document_types", "relation does not exist"
        )
        response = client.get(BASE)

        assert response.status_code == 500
        assert response.json() == {
            "error": "Failed to retrieve document types",
            "detail": "relation does not exist",
        }
