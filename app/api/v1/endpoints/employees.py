from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, Query, Response, status

from app.models.employee import CreateEmployeeRequest, Employee
from app.services.employee_deletion import REASON_RETRIES_EXHAUSTED, DeleteStatus
from app.services.employee_service import employee_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])


def _no_content() -> Response:
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("", response_model=list[Employee])
async def list_employees():
    try:
        employees = await employee_service.get_employees()
    except Exception as err:
        logger.exception("Failed to list employees")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employees",
        ) from err

    return employees or _no_content()


@router.get("/search", response_model=list[Employee])
async def search_employees(name: str = Query(..., min_length=1)):
    try:
        employees = await employee_service.search_by_name(name)
    except Exception as err:
        logger.exception("Failed to search employees by name %s", name)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to search employees",
        ) from err

    return employees or _no_content()


@router.get("/highestSalary", response_model=int)
async def highest_salary():
    try:
        salary = await employee_service.get_highest_salary()
    except Exception as err:
        logger.exception("Failed to compute highest salary")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute highest salary",
        ) from err

    return salary if salary > 0 else _no_content()


@router.get("/topTenHighestEarningEmployeeNames", response_model=list[str | None])
async def top_ten_highest_earning_employee_names():
    try:
        names = await employee_service.get_top_ten_earner_names()
    except Exception as err:
        logger.exception("Failed to compute top earners")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to compute top earners",
        ) from err

    return names or _no_content()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(employee_id: str):
    try:
        employee = await employee_service.get_employee_by_id(employee_id)
    except Exception as err:
        logger.exception("Failed to get employee %s", employee_id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to retrieve employee",
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Employee with ID '{employee_id}' not found",
        )

    return employee


@router.post("", response_model=Employee)
async def create_employee(request: CreateEmployeeRequest):
    try:
        employee = await employee_service.create_employee(request)
    except Exception as err:
        logger.exception("Failed to create employee")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create employee",
        ) from err

    if not employee:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Employee could not be created",
        )

    logger.info("Created employee id=%s", employee.id)
    return employee


@router.delete("/{employee_id}", response_model=str)
async def delete_employee(employee_id: str):
    outcome = await employee_service.delete_employee_by_id(employee_id)

    if outcome.status is DeleteStatus.SUCCEEDED:
        return outcome.message
    if outcome.status is DeleteStatus.NOT_FOUND:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=outcome.message)
    if outcome.reason == REASON_RETRIES_EXHAUSTED:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=outcome.message)
    raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=outcome.message)
