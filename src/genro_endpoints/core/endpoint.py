# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""EndpointBase - Endpoint handlers with application context.

Subclasses implement ``handle_endpoint(router)`` and may read the
application, its service container and its settings while doing so::

    from genro_endpoints import EndpointBase

    class UsersEndpoint(EndpointBase):
        def handle_endpoint(self, router):
            repo = self.services.resolve(UserRepository)

            @router.get("/users")
            def list_users():
                return repo.all()

Context is bound by ``map_endpoints`` through ``_initialize`` right before
``handle_endpoint`` runs. Reading ``application`` earlier raises
``EndpointNotInitialized``.

Endpoint classes are built by the container, so constructor parameters with
type annotations are injected by punq.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from genro_toolbox.typeutils import safe_is_instance

from genro_endpoints.exceptions import EndpointNotInitialized

if TYPE_CHECKING:  # pragma: no cover - import for typing only
    from fastapi import APIRouter, FastAPI
    from punq import Container

__all__ = ["EndpointBase"]


class EndpointBase(ABC):
    """Base class for endpoint handlers bound to an application."""

    __slots__ = ("_application",)

    @property
    def application(self) -> FastAPI:
        """The application this endpoint was mapped into."""
        app = getattr(self, "_application", None)
        if app is None:
            raise EndpointNotInitialized(self)
        return app

    @property
    def services(self) -> Container:
        """The service container attached to the application."""
        from .registry import get_container

        return get_container(self.application)

    @property
    def configuration(self) -> Any:
        """Application settings.

        Returns ``app.state.settings`` when the application carries its own
        settings object, otherwise the library ``EndpointSettings``.
        """
        settings = getattr(self.application.state, "settings", None)
        if settings is not None:
            return settings
        from genro_endpoints.config import get_settings

        return get_settings()

    @property
    def is_initialized(self) -> bool:
        """True once ``map_endpoints`` has bound the application."""
        return getattr(self, "_application", None) is not None

    @abstractmethod
    def handle_endpoint(self, router: APIRouter) -> None:
        """Add this handler's routes to ``router``.

        Args:
            router: Route builder, normally the application itself.
        """
        ...

    def _initialize(self, app: FastAPI) -> None:
        """Bind the application. Called by ``map_endpoints`` only.

        Raises:
            TypeError: If ``app`` is not a FastAPI application.
        """
        if not safe_is_instance(app, "fastapi.applications.FastAPI"):
            raise TypeError(
                f"Endpoint application must be a FastAPI instance, got {type(app).__name__}"
            )
        self._application = app
