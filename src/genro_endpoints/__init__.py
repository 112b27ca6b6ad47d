# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Genro Endpoints - Class-based endpoint discovery for FastAPI.

Define each group of routes as a class, let the library find them and wire
them into the punq container and the FastAPI application at startup.

Public exports:
    - ``EndpointBase``: Base class for endpoint handlers with app context
    - ``EndpointInterface``: Minimal endpoint contract without context
    - ``add_endpoints``: Register every endpoint class on a container
    - ``map_endpoints``: Resolve registered endpoints and add their routes
    - ``EndpointSettings``: Environment-driven defaults

Example::

    from fastapi import FastAPI
    from punq import Container

    from genro_endpoints import EndpointBase, add_endpoints, map_endpoints

    class HelloEndpoint(EndpointBase):
        def handle_endpoint(self, router):
            @router.get("/hello")
            def hello():
                return {"message": "Hello, World!"}

    container = add_endpoints(Container())
    app = map_endpoints(FastAPI(), container)
"""

__version__ = "0.1.0"

from .config import EndpointSettings, get_settings
from .core import (
    EndpointBase,
    EndpointInterface,
    add_endpoints,
    attach_container,
    discover_endpoints,
    get_container,
    import_packages,
    map_endpoints,
    registered_endpoints,
)
from .exceptions import (
    ContainerNotConfigured,
    EndpointError,
    EndpointNotInitialized,
    InvalidMarker,
    NoEndpointsFound,
)

__all__ = [
    "EndpointBase",
    "EndpointInterface",
    "EndpointSettings",
    "get_settings",
    "add_endpoints",
    "attach_container",
    "discover_endpoints",
    "get_container",
    "import_packages",
    "map_endpoints",
    "registered_endpoints",
    "EndpointError",
    "InvalidMarker",
    "ContainerNotConfigured",
    "EndpointNotInitialized",
    "NoEndpointsFound",
]
