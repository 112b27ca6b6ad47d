# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Core runtime aggregator for Genro Endpoints.

Exposes the building blocks from a single module:

Public API:
    - ``EndpointInterface``: Minimal marker contract
    - ``EndpointBase``: Marker base class with application context
    - ``discover_endpoints`` / ``import_packages``: Class discovery
    - ``add_endpoints``: Register endpoint classes on a punq container
    - ``map_endpoints``: Resolve endpoints and let them add their routes

Importing this module performs only imports; it does not scan packages.
"""

from .discovery import discover_endpoints, import_packages, iter_subclasses
from .endpoint import EndpointBase
from .marker import EndpointInterface
from .registry import (
    add_endpoints,
    attach_container,
    get_container,
    map_endpoints,
    registered_endpoints,
)

__all__ = [
    "EndpointBase",
    "EndpointInterface",
    "add_endpoints",
    "attach_container",
    "discover_endpoints",
    "get_container",
    "import_packages",
    "iter_subclasses",
    "map_endpoints",
    "registered_endpoints",
]
