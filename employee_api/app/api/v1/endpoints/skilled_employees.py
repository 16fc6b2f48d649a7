"""
Employee endpoints for API v1 (skills variant).

This deployment serves the employee resource at the root of the API
prefix.  Employees carry an optional skills record which is written
and removed together with them.  Deleting an employee answers with a
confirmation message rather than an empty response.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Request, status

from employee_api.app.schemas.skills import SkilledEmployeeRead, parse_skilled_employee
from employee_api.app.services.mapper import skilled_to_external, skilled_to_internal
from employee_api.app.services.skilled_employee_service import SkilledEmployeeService

router = APIRouter()


def get_skilled_employee_service(request: Request) -> SkilledEmployeeService:
    return request.app.state.employee_service


@router.post("/", response_model=SkilledEmployeeRead, status_code=status.HTTP_201_CREATED)
async def create_employee(
    payload: Any = Body(...),
    service: SkilledEmployeeService = Depends(get_skilled_employee_service),
) -> SkilledEmployeeRead:
    """Create an employee, and its skills record if one is given."""
    employee = parse_skilled_employee(payload)
    record = await service.create(skilled_to_internal(employee))
    return skilled_to_external(record)


@router.get("/{employee_id}", response_model=SkilledEmployeeRead)
async def get_employee(
    employee_id: int,
    service: SkilledEmployeeService = Depends(get_skilled_employee_service),
) -> SkilledEmployeeRead:
    return skilled_to_external(await service.get_by_id(employee_id))


@router.get("/", response_model=List[SkilledEmployeeRead])
async def list_employees(
    service: SkilledEmployeeService = Depends(get_skilled_employee_service),
) -> List[SkilledEmployeeRead]:
    records = await service.list_all()
    return [skilled_to_external(record) for record in records]


@router.put("/{employee_id}", response_model=SkilledEmployeeRead)
async def update_employee(
    employee_id: int,
    payload: Any = Body(...),
    service: SkilledEmployeeService = Depends(get_skilled_employee_service),
) -> SkilledEmployeeRead:
    """Replace an employee's name, email and skills.

    Omitting ``skills`` removes the employee's skills record.
    """
    employee = parse_skilled_employee(payload)
    record = await service.update(employee_id, skilled_to_internal(employee, employee_id))
    return skilled_to_external(record)


@router.delete("/{employee_id}", response_model=Dict[str, str])
async def delete_employee(
    employee_id: int,
    service: SkilledEmployeeService = Depends(get_skilled_employee_service),
) -> Dict[str, str]:
    await service.delete(employee_id)
    return {"message": f"Employee with ID: {employee_id} was deleted."}
