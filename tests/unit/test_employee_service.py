from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from app.core.results import Ok
from app.models.employee import CreateEmployeeRequest
from app.services.employee_deletion import DeleteStatus
from app.services.employee_service import EmployeeService
from tests.conftest import make_employee

AMY = make_employee("Amy", 90000, "1")
BO = make_employee("Bo", 150000, "2")


def _service(employees=None) -> tuple[EmployeeService, MagicMock]:
    gateway = MagicMock()
    gateway.list_all = AsyncMock(return_value=employees if employees is not None else [])
    gateway.get_by_id = AsyncMock(return_value=None)
    gateway.create = AsyncMock(return_value=None)
    gateway.delete = AsyncMock(return_value=Ok(True))
    return EmployeeService(gateway), gateway


@pytest.mark.anyio
async def test_get_employees():
    service, _ = _service([AMY, BO])
    assert await service.get_employees() == [AMY, BO]


@pytest.mark.anyio
async def test_search_by_name():
    service, _ = _service([AMY, BO])
    assert await service.search_by_name("amy") == [AMY]


@pytest.mark.anyio
async def test_highest_salary_and_top_ten():
    service, _ = _service([AMY, BO])
    assert await service.get_highest_salary() == 150000
    assert await service.get_top_ten_earner_names() == ["Bo", "Amy"]


@pytest.mark.anyio
async def test_reads_fetch_fresh_data_every_call():
    service, gateway = _service([AMY])

    await service.get_highest_salary()
    gateway.list_all.return_value = [AMY, BO]
    assert await service.get_highest_salary() == 150000
    assert gateway.list_all.await_count == 2


@pytest.mark.anyio
async def test_reads_with_failed_upstream_are_empty():
    service, _ = _service([])

    assert await service.get_employees() == []
    assert await service.search_by_name("amy") == []
    assert await service.get_highest_salary() == 0
    assert await service.get_top_ten_earner_names() == []


@pytest.mark.anyio
async def test_get_employee_by_id_passes_through():
    service, gateway = _service()
    gateway.get_by_id.return_value = AMY

    assert await service.get_employee_by_id("1") == AMY
    gateway.get_by_id.assert_awaited_once_with("1")


@pytest.mark.anyio
async def test_create_employee_passes_through():
    service, gateway = _service()
    gateway.create.return_value = AMY
    request = CreateEmployeeRequest(name="Amy", salary=90000, age=30, title="Engineer")

    assert await service.create_employee(request) == AMY
    gateway.create.assert_awaited_once_with(request)


@pytest.mark.anyio
async def test_delete_employee_by_id():
    service, gateway = _service()
    gateway.get_by_id.return_value = AMY

    outcome = await service.delete_employee_by_id("1")

    assert outcome.status is DeleteStatus.SUCCEEDED
    assert gateway.delete.await_args.args == ("Amy",)
