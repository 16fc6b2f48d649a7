"""
Top‑level router for version 1 of the API.

``build_router`` aggregates the informational endpoint and the
employee endpoints of the requested variant.  The info router is
included first so that ``/info`` is not captured by the skills
variant's ``/{employee_id}`` route.
"""

from fastapi import APIRouter

from employee_api.app.core.config import VARIANT_DIRECTORY, VARIANT_SKILLS, VARIANTS

from .endpoints import employees, info, skilled_employees


def build_router(variant: str) -> APIRouter:
    """Create a v1 router exposing the given employee variant.

    Raises
    ------
    ValueError
        If ``variant`` is not one of ``VARIANTS``.
    """
    if variant not in VARIANTS:
        raise ValueError(f"Unknown employee variant: {variant!r}")

    router = APIRouter()
    router.include_router(info.router, prefix="/info", tags=["info"])
    if variant == VARIANT_DIRECTORY:
        router.include_router(employees.router, prefix="/employees", tags=["employees"])
    elif variant == VARIANT_SKILLS:
        # The skills deployment serves employees at the root of the prefix.
        router.include_router(skilled_employees.router, tags=["employees"])
    return router
