"""Entry point for serving the Employee Records API.

Host, port, variant and database location are read from environment
variables (see ``employee_api.app.core.config``).

Usage:
    EMPLOYEE_VARIANT=skills python run.py
"""
import uvicorn

from employee_api.app.core.config import settings


def main() -> None:
    """Start the API using Uvicorn."""
    uvicorn.run(
        "employee_api.app.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
