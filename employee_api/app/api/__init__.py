"""
API package containing versioned routes.

A version subpackage exposes a ``build_router`` function which
includes the endpoints of the configured variant.
"""
