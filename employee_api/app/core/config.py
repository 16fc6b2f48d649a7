"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass
from pathlib import Path

VARIANT_DIRECTORY = "directory"
VARIANT_SKILLS = "skills"
VARIANTS = (VARIANT_DIRECTORY, VARIANT_SKILLS)


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    api_prefix: str = os.getenv("API_PREFIX", "/api/v1")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Which deployment to serve: ``directory`` exposes employees with a
    # department under ``/employees``; ``skills`` exposes employees with
    # an owned skills record at the root of the API prefix.
    variant: str = os.getenv("EMPLOYEE_VARIANT", VARIANT_DIRECTORY)

    # Path to the SQLite database.  If a relative path is provided, it
    # is resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "employees.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class creation time, environment variables should
# be set before importing this module.
settings = Settings()


def resolve_project_path(path: str) -> str:
    """Resolve ``path`` against the project root unless it is absolute.

    The project root is the directory holding the ``employee_api``
    package.
    """
    if os.path.isabs(path):
        return path
    base_dir = Path(__file__).resolve().parent.parent.parent.parent
    return str((base_dir / path).resolve())
