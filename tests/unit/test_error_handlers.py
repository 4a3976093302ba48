from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from split_it.api.error_handlers import register_error_handlers
from split_it.domain.errors import DuplicateNameError, HasDependentExpensesError


def _client_raising(exc: Exception) -> TestClient:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/boom")
    def boom() -> None:
        raise exc

    return TestClient(app, raise_server_exceptions=False)


def test_domain_error_handler_returns_contract_shape() -> None:
    response = _client_raising(
        DuplicateNameError(message="Duplicated participant")
    ).get("/boom")

    assert response.status_code == 409
    assert response.json() == {
        "code": "DUPLICATE_NAME",
        "message": "Duplicated participant",
    }


def test_domain_error_details_are_included_when_present() -> None:
    response = _client_raising(
        HasDependentExpensesError(details={"name": "Ana", "expense_count": 2})
    ).get("/boom")

    assert response.status_code == 409
    body = response.json()
    assert body["code"] == "HAS_DEPENDENT_EXPENSES"
    assert body["details"] == {"name": "Ana", "expense_count": 2}


def test_storage_error_maps_to_service_unavailable() -> None:
    response = _client_raising(
        OperationalError("SELECT 1", {}, Exception("disk I/O error"))
    ).get("/boom")

    assert response.status_code == 503
    assert response.json()["code"] == "STORAGE_UNAVAILABLE"
    assert "disk I/O error" not in response.text
