"""
Main entrypoint for the Employee Records API.

This module assembles the FastAPI application, sets up logging,
wires the employee service for the configured variant and includes
the versioned router.  ``create_app`` builds and configures the app,
which is then instantiated at module import time as ``app``, e.g.::

    uvicorn employee_api.app.main:app --reload
"""

import logging
from typing import List, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .api.v1.router import build_router
from .core.config import VARIANT_SKILLS, Settings, settings as default_settings
from .core.db import init_db, resolve_database_path
from .core.errors import NotFoundError, ValidationError
from .core.logging_config import setup_logging
from .schemas.validation import FieldViolation, violation_from_error
from .services.employee_service import EmployeeService
from .services.skilled_employee_service import SkilledEmployeeService

logger = logging.getLogger(__name__)


async def not_found_handler(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND,
        content={"detail": str(exc)},
    )


def _violations_response(violations: List[FieldViolation]) -> JSONResponse:
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Validation failed",
            "violations": [v.model_dump() for v in violations],
        },
    )


async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    return _violations_response(exc.violations)


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    # A missing or unparsable body, or a non-integer path id, is rejected
    # by FastAPI before the handler runs.
    return _violations_response([violation_from_error(error) for error in exc.errors()])


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to build the app from.  Defaults to the
        module-level settings read from the environment.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.

    Raises
    ------
    ValueError
        If ``settings.variant`` names an unknown variant.
    """
    settings = settings or default_settings
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings)

    router = build_router(settings.variant)
    db_path = resolve_database_path(settings.database_url)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    if settings.variant == VARIANT_SKILLS:
        app.state.employee_service = SkilledEmployeeService(db_path)
    else:
        app.state.employee_service = EmployeeService(db_path)

    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.include_router(router, prefix=settings.api_prefix)

    @app.on_event("startup")
    async def startup_event() -> None:
        # Creates the database file if it does not exist and brings the
        # schema up to date.
        init_db(db_path)
        logger.info("Serving %s variant from %s", settings.variant, db_path)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
