"""
API package containing versioned routes.

Each version subpackage (currently only ``v1``) exposes a ``router``
that includes the routers of its endpoints.
"""
