# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Registration and mapping of endpoint handlers.

The two startup extension points live here.

``add_endpoints(container, *packages, marker=EndpointBase, scope=None)``
    Discovers endpoint classes and registers each one on the punq container
    under its own class with the requested lifetime, plus a factory under
    ``marker`` that resolves it. Classes already registered on that
    container for the same marker are skipped, so repeated calls are
    harmless. Returns the container.

``map_endpoints(app, container=None, *, marker=EndpointBase)``
    Resolves every service registered under ``marker``, binds
    ``EndpointBase`` instances to ``app`` and calls ``handle_endpoint(app)``
    once per instance. Returns the application.

The container travels with the application on ``app.state.container`` so
endpoints can reach it through ``EndpointBase.services``.

Example::

    from fastapi import FastAPI
    from punq import Container

    from genro_endpoints import add_endpoints, map_endpoints

    container = add_endpoints(Container(), "myapp.endpoints")
    app = map_endpoints(FastAPI(), container)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any
from weakref import WeakKeyDictionary

from punq import Container, Scope

from genro_endpoints.config import get_settings
from genro_endpoints.exceptions import ContainerNotConfigured, NoEndpointsFound

from .discovery import PackageSpec, discover_endpoints
from .endpoint import EndpointBase

if TYPE_CHECKING:
    from fastapi import FastAPI

__all__ = [
    "add_endpoints",
    "attach_container",
    "get_container",
    "map_endpoints",
    "registered_endpoints",
]

logger = logging.getLogger("genro_endpoints")

# container -> marker -> endpoint classes, in registration order
_REGISTERED: WeakKeyDictionary[Container, dict[type, list[type]]] = WeakKeyDictionary()

_SCOPES = {"transient": Scope.transient, "singleton": Scope.singleton}


def _resolve_scope(scope: Scope | str | None) -> Scope:
    if scope is None:
        scope = get_settings().scope
    if isinstance(scope, Scope):
        return scope
    try:
        return _SCOPES[scope]
    except KeyError as err:
        raise ValueError(f"Unknown scope {scope!r}; expected one of {sorted(_SCOPES)}") from err


def _resolver(container: Container, cls: type):
    return lambda: container.resolve(cls)


def add_endpoints(
    container: Container,
    *packages: PackageSpec,
    marker: type = EndpointBase,
    scope: Scope | str | None = None,
) -> Container:
    """Register all endpoint classes as services of ``container``.

    Args:
        container: The punq container to populate.
        *packages: Packages to import and restrict discovery to. When empty,
            ``EndpointSettings.packages`` is used; when that is empty too,
            every loaded implementer of ``marker`` is registered.
        marker: Marker contract the classes are registered under.
        scope: ``Scope`` or its name. Defaults to ``EndpointSettings.scope``.

    Returns:
        The same container, for chaining.

    Raises:
        NoEndpointsFound: In strict mode, when nothing was discovered.
    """
    settings = get_settings()
    lifetime = _resolve_scope(scope)
    search: Iterable[PackageSpec] = packages or settings.packages
    found = discover_endpoints(marker, search)
    if not found:
        if settings.strict:
            raise NoEndpointsFound(marker)
        logger.warning("No endpoint implementing %s found", marker.__name__)
        return container

    known = _REGISTERED.setdefault(container, {}).setdefault(marker, [])
    added = 0
    for cls in found:
        if cls in known:
            continue
        container.register(cls, scope=lifetime)
        container.register(marker, factory=_resolver(container, cls))
        known.append(cls)
        added += 1
        logger.debug("registered %s.%s as %s", cls.__module__, cls.__qualname__, marker.__name__)
    logger.info("Registered %d endpoint(s) for %s", added, marker.__name__)
    return container


def registered_endpoints(container: Container, marker: type = EndpointBase) -> list[type]:
    """Return the classes ``add_endpoints`` registered on ``container``."""
    return list(_REGISTERED.get(container, {}).get(marker, ()))


def attach_container(app: FastAPI, container: Container) -> FastAPI:
    """Store ``container`` on the application state."""
    app.state.container = container
    return app


def get_container(app: FastAPI) -> Container:
    """Return the container attached to ``app``.

    Raises:
        ContainerNotConfigured: If no container was attached.
    """
    container = getattr(app.state, "container", None)
    if container is None:
        raise ContainerNotConfigured(app)
    return container


def map_endpoints(
    app: FastAPI,
    container: Container | None = None,
    *,
    marker: type = EndpointBase,
) -> FastAPI:
    """Resolve registered endpoints and let each one add its routes.

    Args:
        app: The application to configure.
        container: Container to resolve from. Attached to ``app`` when given;
            otherwise the container already attached to ``app`` is used.
        marker: Marker contract the endpoints were registered under.

    Returns:
        The same application, for chaining.

    Raises:
        ContainerNotConfigured: If no container is available.
    """
    if container is not None:
        attach_container(app, container)
    else:
        container = get_container(app)

    endpoints: list[Any] = container.resolve_all(marker)
    for endpoint in endpoints:
        if isinstance(endpoint, EndpointBase):
            endpoint._initialize(app)
        logger.debug("mapping %s", type(endpoint).__qualname__)
        endpoint.handle_endpoint(app)
    logger.info("Mapped %d endpoint(s) for %s", len(endpoints), marker.__name__)
    return app
