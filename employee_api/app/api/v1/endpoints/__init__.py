"""
Endpoint subpackage for API v1.

Each module in this package defines an APIRouter for one variant of
the employee resource, plus the informational endpoint.
"""
