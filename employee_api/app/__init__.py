"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Two deployments share this code base: the *directory*
variant (employees with a department) and the *skills* variant
(employees owning an optional skills record).  Each variant exposes a
router defined in ``api/v1/endpoints``; ``create_app`` mounts the one
selected by configuration.
"""

from .main import app  # noqa: F401
