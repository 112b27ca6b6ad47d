# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""EndpointInterface - Minimal contract for endpoint handler classes.

Any concrete subclass is picked up by discovery when it is used as marker::

    from genro_endpoints import EndpointInterface, add_endpoints, map_endpoints

    class Health(EndpointInterface):
        def handle_endpoint(self, app):
            app.get("/health")(lambda: {"status": "ok"})

    add_endpoints(container, marker=EndpointInterface)
    map_endpoints(app, container, marker=EndpointInterface)

Unlike ``EndpointBase`` the instance receives no application context; the
application is only passed to ``handle_endpoint``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from fastapi import FastAPI

__all__ = ["EndpointInterface"]


class EndpointInterface(ABC):
    """Contract for classes that add routes to an application."""

    @abstractmethod
    def handle_endpoint(self, app: FastAPI) -> None:
        """Add this handler's routes to ``app``.

        Args:
            app: The application being configured. Routes are added with the
                usual FastAPI helpers (``app.get``, ``app.add_api_route``,
                ``app.include_router``...).
        """
        ...
