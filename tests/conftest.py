from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.testclient import TestClient

from app.main import app
from app.models.employee import Employee


def make_employee(name: str | None, salary: int, employee_id: str | None = None, **extra) -> Employee:
    return Employee(
        id=employee_id or f"id-{name or 'anon'}-{salary}",
        name=name,
        salary=salary,
        age=extra.get("age", 30),
        title=extra.get("title", "Engineer"),
    )


def upstream_employee(employee_id: str, name: str, salary: int) -> dict:
    return {
        "id": employee_id,
        "employee_name": name,
        "employee_salary": salary,
        "employee_age": 30,
        "employee_title": "Engineer",
        "employee_email": f"{name.lower()}@company.com",
    }


def mock_response(status: int, json_body=None, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status = status
    response.json = AsyncMock(return_value=json_body)
    response.text = AsyncMock(return_value=text)
    return response


def mock_request_context(response: MagicMock) -> AsyncMock:
    context = AsyncMock()
    context.__aenter__.return_value = response
    context.__aexit__.return_value = None
    return context


def mock_session(*responses: MagicMock) -> MagicMock:
    """aiohttp session stand-in answering successive requests with ``responses``."""
    session = MagicMock()
    session.request.side_effect = [mock_request_context(r) for r in responses]
    session.close = AsyncMock()
    return session


@pytest.fixture(autouse=True)
def _upstream_settings():
    from app.core.config import settings

    original_base_url = settings.EMPLOYEE_API_BASE_URL
    settings.EMPLOYEE_API_BASE_URL = ""
    yield
    settings.EMPLOYEE_API_BASE_URL = original_base_url


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()

