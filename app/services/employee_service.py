"""Employee operations backed by the upstream employee API (no local storage)."""

from __future__ import annotations

import logging

from app.core.observability import log_operation
from app.models.employee import CreateEmployeeRequest, Employee
from app.services import employee_aggregates
from app.services.employee_deletion import DeleteOutcome, delete_employee_by_id
from app.services.employee_gateway import EmployeeGateway, employee_gateway

logger = logging.getLogger(__name__)


class EmployeeService:
    def __init__(self, gateway: EmployeeGateway) -> None:
        self.gateway = gateway

    @log_operation()
    async def get_employees(self) -> list[Employee]:
        return await self.gateway.list_all()

    @log_operation()
    async def search_by_name(self, query: str) -> list[Employee]:
        employees = await self.gateway.list_all()
        return employee_aggregates.search_by_name(employees, query)

    @log_operation()
    async def get_employee_by_id(self, employee_id: str) -> Employee | None:
        return await self.gateway.get_by_id(employee_id)

    @log_operation()
    async def get_highest_salary(self) -> int:
        employees = await self.gateway.list_all()
        return employee_aggregates.highest_salary(employees)

    @log_operation()
    async def get_top_ten_earner_names(self) -> list[str | None]:
        employees = await self.gateway.list_all()
        return employee_aggregates.top_earner_names(employees)

    @log_operation()
    async def create_employee(self, request: CreateEmployeeRequest) -> Employee | None:
        return await self.gateway.create(request)

    @log_operation()
    async def delete_employee_by_id(self, employee_id: str) -> DeleteOutcome:
        return await delete_employee_by_id(self.gateway, employee_id)


employee_service = EmployeeService(employee_gateway)
