from __future__ import annotations

import pytest
from starlette.testclient import TestClient

from employee_api.app.core.config import VARIANT_DIRECTORY, VARIANT_SKILLS, Settings
from employee_api.app.core.db import init_db
from employee_api.app.main import create_app


def _settings(tmp_path, variant: str) -> Settings:
    return Settings(
        variant=variant,
        database_url=str(tmp_path / f"{variant}.db"),
        api_prefix="/api/v1",
    )


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def db_path(tmp_path) -> str:
    path = str(tmp_path / "store.db")
    init_db(path)
    return path


@pytest.fixture
def client(tmp_path):
    app = create_app(_settings(tmp_path, VARIANT_DIRECTORY))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def skills_client(tmp_path):
    app = create_app(_settings(tmp_path, VARIANT_SKILLS))
    with TestClient(app) as c:
        yield c


@pytest.fixture
def ann():
    return {"name": "Ann", "email": "ann@x.com", "department": "Eng"}


@pytest.fixture
def pavan():
    return {"name": "Pavan", "email": "pavan@gmail.com", "skills": {"skills": "Java, Spring Boot"}}
