"""Employees router - employee records and AI-assisted intake."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from hrms_api.dependencies import get_employee_service, get_intake_service
from hrms_api.models.domain.filters import EmployeeFilters
from hrms_api.models.domain.user import CurrentUser
from hrms_api.models.dto.common import MessageResponse
from hrms_api.models.dto.employee import (
    DepartmentListResponse,
    EmployeeDetailResponse,
    EmployeeListResponse,
    EmployeeStatsResponse,
    EmployeeUpdate,
)
from hrms_api.models.dto.intake import IntakeReport, IntakeRequest, ResendWelcomeResponse
from hrms_api.security.auth import get_current_user
from hrms_api.security.rate_limit import API_DEFAULT_LIMIT, EMPLOYEE_INTAKE_LIMIT, limiter
from hrms_api.services.employee_service import EmployeeService
from hrms_api.services.intake_service import EmployeeIntakeService

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/employees", response_model=IntakeReport)
@limiter.limit(EMPLOYEE_INTAKE_LIMIT)
async def create_employees(
    request: Request,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    intake_service: Annotated[EmployeeIntakeService, Depends(get_intake_service)],
    body: IntakeRequest | None = None,
) -> IntakeReport:
    """Create employees from a natural-language description.

    Every extracted person gets an employee record, a login account and a
    welcome email. Individual failures are reported per record; the request
    itself succeeds once the model reply has been parsed.
    """
    prompt = body.prompt if body else None
    return await intake_service.intake(prompt, current_user.employee_id)


@router.get("/employees", response_model=EmployeeListResponse)
async def list_employees(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
    department: str | None = Query(default=None, max_length=100),
    status: str | None = Query(default=None, max_length=50),
    search: str | None = Query(default=None, max_length=200),
    page: int = Query(default=1, ge=1, le=10000),
    limit: int = Query(default=10, ge=1, le=100),
) -> EmployeeListResponse:
    """List employees with optional filters."""
    filters = EmployeeFilters.from_query(department=department, status=status, search=search)
    return await employee_service.list_employees(filters, page=page, limit=limit)


@router.get("/employees/stats", response_model=EmployeeStatsResponse)
async def get_employee_stats(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeStatsResponse:
    """Get headcount by status and department."""
    return await employee_service.get_stats()


@router.get("/departments", response_model=DepartmentListResponse)
async def list_departments(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> DepartmentListResponse:
    """Get all departments with headcount."""
    return await employee_service.list_departments()


@router.get("/employees/{employee_id}", response_model=EmployeeDetailResponse)
async def get_employee(
    employee_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeDetailResponse:
    """Get employee details."""
    return await employee_service.get_employee(employee_id)


@router.put("/employees/{employee_id}", response_model=EmployeeDetailResponse)
@limiter.limit(API_DEFAULT_LIMIT)
async def update_employee(
    request: Request,
    employee_id: int,
    body: EmployeeUpdate,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> EmployeeDetailResponse:
    """Update an employee."""
    return await employee_service.update_employee(employee_id, body)


@router.delete("/employees/{employee_id}", response_model=MessageResponse)
@limiter.limit(API_DEFAULT_LIMIT)
async def delete_employee(
    request: Request,
    employee_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    employee_service: Annotated[EmployeeService, Depends(get_employee_service)],
) -> MessageResponse:
    """Delete an employee and its login account."""
    return await employee_service.delete_employee(employee_id)


@router.post("/employees/{employee_id}/resend-welcome", response_model=ResendWelcomeResponse)
@limiter.limit(EMPLOYEE_INTAKE_LIMIT)
async def resend_welcome_email(
    request: Request,
    employee_id: int,
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    intake_service: Annotated[EmployeeIntakeService, Depends(get_intake_service)],
) -> ResendWelcomeResponse:
    """Issue a new one-time password for the employee's account and email it."""
    logger.info("User %s requested credential resend for employee %s", current_user.id, employee_id)
    return await intake_service.resend_welcome_email(employee_id)
