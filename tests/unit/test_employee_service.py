from __future__ import annotations

import pytest

from employee_api.app.core.errors import NotFoundError
from employee_api.app.services.employee_service import EmployeeService
from employee_api.app.services.mapper import EmployeeRecord


@pytest.fixture
def service(db_path) -> EmployeeService:
    return EmployeeService(db_path)


def _ann(**overrides) -> EmployeeRecord:
    fields = {"name": "Ann", "email": "ann@x.com", "department": "Eng"}
    fields.update(overrides)
    return EmployeeRecord(**fields)


@pytest.mark.anyio
async def test_create_assigns_new_ids(service):
    first = await service.create(_ann())
    second = await service.create(_ann(name="Bob"))

    assert first.id == 1
    assert second.id == 2
    assert first.name == "Ann"


@pytest.mark.anyio
async def test_create_ignores_supplied_id(service):
    created = await service.create(_ann(id=42))

    assert created.id == 1
    with pytest.raises(NotFoundError):
        await service.get_by_id(42)


@pytest.mark.anyio
async def test_get_by_id_returns_stored_record(service):
    created = await service.create(_ann())

    assert await service.get_by_id(created.id) == created


@pytest.mark.anyio
async def test_get_by_id_unknown_raises_not_found(service):
    with pytest.raises(NotFoundError) as exc_info:
        await service.get_by_id(7)

    assert exc_info.value.object_type == "Employee"
    assert exc_info.value.object_id == 7
    assert str(exc_info.value) == "Employee not found with ID: 7"


@pytest.mark.anyio
async def test_list_all_returns_every_row(service):
    assert await service.list_all() == []

    await service.create(_ann())
    await service.create(_ann(name="Bob", email="bob@x.com"))

    names = [record.name for record in await service.list_all()]
    assert names == ["Ann", "Bob"]


@pytest.mark.anyio
async def test_update_overwrites_all_fields_and_keeps_id(service):
    created = await service.create(_ann())

    updated = await service.update(
        created.id, _ann(name="Anna", email="anna@x.com", department="Sales")
    )

    assert updated == EmployeeRecord(id=created.id, name="Anna", email="anna@x.com", department="Sales")
    assert await service.get_by_id(created.id) == updated


@pytest.mark.anyio
async def test_update_unknown_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.update(3, _ann())

    assert await service.list_all() == []


@pytest.mark.anyio
async def test_delete_then_get_raises_not_found(service):
    created = await service.create(_ann())

    await service.delete(created.id)

    with pytest.raises(NotFoundError):
        await service.get_by_id(created.id)


@pytest.mark.anyio
async def test_delete_unknown_raises_not_found(service):
    with pytest.raises(NotFoundError):
        await service.delete(1)


@pytest.mark.anyio
async def test_ids_are_not_reused_after_delete(service):
    first = await service.create(_ann())
    await service.delete(first.id)

    second = await service.create(_ann())

    assert second.id != first.id


@pytest.mark.anyio
async def test_ann_scenario(service):
    created = await service.create(_ann())
    assert created == EmployeeRecord(id=1, name="Ann", email="ann@x.com", department="Eng")
    assert await service.get_by_id(1) == created

    updated = await service.update(1, _ann(name="Anna"))
    assert updated.name == "Anna"
    assert updated.id == 1

    await service.delete(1)
    with pytest.raises(NotFoundError):
        await service.get_by_id(1)


@pytest.mark.anyio
@pytest.mark.parametrize("employee_id", [2**63, 2**64, -(2**63) - 1])
async def test_ids_outside_integer_range_raise_not_found(service, employee_id):
    await service.create(_ann())

    with pytest.raises(NotFoundError):
        await service.get_by_id(employee_id)
    with pytest.raises(NotFoundError):
        await service.update(employee_id, _ann(name="Anna"))
    with pytest.raises(NotFoundError):
        await service.delete(employee_id)

    assert [r.name for r in await service.list_all()] == ["Ann"]
