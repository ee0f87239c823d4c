"""Gateway to the upstream employee API.

Reads fail open: any failure becomes an empty list or ``None`` and is logged.
Delete returns the failure itself so callers can report what went wrong.
"""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from app.core.config import Settings
from app.core.envelope import Envelope, decode_envelope, encode_body
from app.core.observability import log_operation
from app.core.results import ErrorKind, Failure, Ok, Result
from app.models.employee import CreateEmployeeRequest, DeleteEmployeeRequest, Employee
from app.services.upstream_transport import RetryingTransport, RetryPolicy, build_client_session

logger = logging.getLogger(__name__)


class EmployeeGateway:
    def __init__(self) -> None:
        self.session: aiohttp.ClientSession | None = None
        self.transport: RetryingTransport | None = None
        self.initialized = False

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.EMPLOYEE_API_BASE_URL:
            logger.warning("Employee API base URL missing — EmployeeGateway not initialized")
            return

        self.session = build_client_session(settings)
        self.transport = RetryingTransport(
            self.session,
            settings.EMPLOYEE_API_BASE_URL,
            RetryPolicy.from_settings(settings),
        )
        self.initialized = True
        logger.info("EmployeeGateway initialized (base_url=%s)", settings.EMPLOYEE_API_BASE_URL)

    async def close(self) -> None:
        if self.session:
            await self.session.close()
        self.session = None
        self.transport = None
        self.initialized = False

    async def _call(
        self,
        payload_type: Any,
        method: str,
        *path: str,
        body: dict[str, Any] | None = None,
        exhausted_message: str | None = None,
    ) -> Result[Envelope[Any]]:
        if not self.transport:
            return Failure(ErrorKind.UPSTREAM_UNAVAILABLE, "EmployeeGateway not initialized")

        result = await self.transport.send(method, *path, body=body, exhausted_message=exhausted_message)
        if isinstance(result, Failure):
            return result
        return decode_envelope(result.value, payload_type)

    @log_operation("list_all")
    async def list_all(self) -> list[Employee]:
        try:
            result = await self._call(list[Employee], "GET")
        except Exception:
            logger.exception("Unexpected error fetching employees")
            return []
        if isinstance(result, Failure):
            logger.error("Error fetching employees: %s", result.message)
            return []
        return result.value.data or []

    @log_operation("get_by_id")
    async def get_by_id(self, employee_id: str) -> Employee | None:
        try:
            result = await self._call(Employee, "GET", employee_id)
        except Exception:
            logger.exception("Unexpected error fetching employee by ID %s", employee_id)
            return None
        if isinstance(result, Failure):
            logger.error("Error fetching employee by ID %s: %s", employee_id, result.message)
            return None
        return result.value.data

    @log_operation("create")
    async def create(self, request: CreateEmployeeRequest) -> Employee | None:
        try:
            result = await self._call(Employee, "POST", body=encode_body(request))
        except Exception:
            logger.exception("Unexpected error creating employee")
            return None
        if isinstance(result, Failure):
            logger.error("Error creating employee: %s", result.message)
            return None
        return result.value.data

    @log_operation("delete")
    async def delete(self, name: str, exhausted_message: str | None = None) -> Result[bool]:
        result = await self._call(
            bool,
            "DELETE",
            body=encode_body(DeleteEmployeeRequest(name=name)),
            exhausted_message=exhausted_message,
        )
        if isinstance(result, Failure):
            return result
        return Ok(result.value.data is True)

    async def check_connection(self) -> bool:
        if not self.session or not self.transport:
            return False
        try:
            async with self.session.get(self.transport.base_url) as response:
                return response.status == 200
        except Exception:
            logger.exception("Employee API connection check failed")
            return False


employee_gateway = EmployeeGateway()
