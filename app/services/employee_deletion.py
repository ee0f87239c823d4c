"""Delete-by-id workflow.

Upstream deletes by name, so the id is resolved to a name first. A rename
between the two calls is not detected.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from app.core.results import ErrorKind, Failure
from app.services.employee_gateway import EmployeeGateway

logger = logging.getLogger(__name__)

REASON_DELETE_RETURNED_FALSE = "delete returned false"
REASON_RETRIES_EXHAUSTED = "retries exhausted"


class DeleteStatus(str, Enum):
    SUCCEEDED = "succeeded"
    NOT_FOUND = "not_found"
    FAILED = "failed"


@dataclass(frozen=True)
class DeleteOutcome:
    status: DeleteStatus
    message: str
    reason: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is DeleteStatus.SUCCEEDED


async def delete_employee_by_id(gateway: EmployeeGateway, employee_id: str) -> DeleteOutcome:
    """Resolve ``employee_id`` to a name, then delete by name. Never raises."""
    try:
        employee = await gateway.get_by_id(employee_id)
        if employee is None or not employee.name:
            return DeleteOutcome(DeleteStatus.NOT_FOUND, f"Employee not found with ID: {employee_id}")

        result = await gateway.delete(
            employee.name,
            exhausted_message=f"Failed to delete employee after multiple retries: {employee_id}",
        )

        if isinstance(result, Failure):
            if result.kind is ErrorKind.RETRIES_EXHAUSTED:
                return DeleteOutcome(DeleteStatus.FAILED, result.message, REASON_RETRIES_EXHAUSTED)
            logger.error("Error while deleting employee ID %s: %s", employee_id, result.message)
            return DeleteOutcome(DeleteStatus.FAILED, f"Unexpected error: {result.message}", result.kind.value)

        if result.value:
            return DeleteOutcome(DeleteStatus.SUCCEEDED, f"Successfully deleted employee with ID: {employee_id}")
        return DeleteOutcome(
            DeleteStatus.FAILED,
            f"Failed to delete employee with ID: {employee_id}",
            REASON_DELETE_RETURNED_FALSE,
        )
    except Exception as e:
        logger.exception("Unexpected error while deleting employee ID %s", employee_id)
        return DeleteOutcome(DeleteStatus.FAILED, f"Unexpected error: {e}", str(e))
