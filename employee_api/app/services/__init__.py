"""
Service layer abstraction.

Each service encapsulates the data access for one variant of the
employee resource.  Services receive the database path explicitly at
construction time.
"""
