"""
Employee endpoints for API v1 (directory variant).

These routes provide CRUD operations for employees with a department.
Each handler validates the inbound payload, performs exactly one call
on the ``EmployeeService`` stored on the application state and maps
the result back to its transfer schema.  ``NotFoundError`` and
``ValidationError`` propagate to the exception handlers registered in
``main.create_app``.
"""

from typing import Any, List

from fastapi import APIRouter, Body, Depends, Request, status

from employee_api.app.schemas.employee import EmployeeRead, parse_employee
from employee_api.app.services.employee_service import EmployeeService
from employee_api.app.services.mapper import to_external, to_internal

router = APIRouter()


def get_employee_service(request: Request) -> EmployeeService:
    return request.app.state.employee_service


@router.post("", response_model=EmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: Any = Body(...),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Create a new employee and return it with its assigned ID."""
    employee = parse_employee(payload)
    record = await service.create(to_internal(employee))
    return to_external(record)


@router.get("/{employee_id}", response_model=EmployeeRead)
async def get_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Retrieve a single employee by its ID.  Returns 404 if missing."""
    return to_external(await service.get_by_id(employee_id))


@router.get("", response_model=List[EmployeeRead])
async def list_employees(
    service: EmployeeService = Depends(get_employee_service),
) -> List[EmployeeRead]:
    records = await service.list_all()
    return [to_external(record) for record in records]


@router.put("/{employee_id}", response_model=EmployeeRead)
async def update_employee(
    employee_id: int,
    payload: Any = Body(...),
    service: EmployeeService = Depends(get_employee_service),
) -> EmployeeRead:
    """Replace an existing employee.

    All fields are required; there are no partial updates.  Returns
    404 if the employee does not exist.
    """
    employee = parse_employee(payload)
    record = await service.update(employee_id, to_internal(employee, employee_id))
    return to_external(record)


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: int,
    service: EmployeeService = Depends(get_employee_service),
) -> None:
    """Delete an employee.  Returns 404 if the employee does not exist."""
    await service.delete(employee_id)
    return None
