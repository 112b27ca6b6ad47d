# Copyright 2025 Softwell S.r.l. - All Rights Reserved
# SPDX-License-Identifier: Apache-2.0
"""Exceptions for Genro Endpoints.

These cover misuse of the discovery and mapping helpers only. Errors raised
while resolving services or adding routes come straight from punq and FastAPI.
"""

from typing import Any

__all__ = [
    "EndpointError",
    "InvalidMarker",
    "ContainerNotConfigured",
    "EndpointNotInitialized",
    "NoEndpointsFound",
]


class EndpointError(Exception):
    """Base class for every error raised by Genro Endpoints."""


class InvalidMarker(EndpointError, TypeError):
    """Raised when the marker used for discovery is not a class.

    Attributes:
        marker: The offending object.
    """

    def __init__(self, marker: Any) -> None:
        self.marker = marker
        super().__init__(f"Endpoint marker must be a class, got {type(marker).__name__}")


class ContainerNotConfigured(EndpointError, RuntimeError):
    """Raised when endpoints are mapped on an application without a container.

    Attributes:
        app: The application passed to ``map_endpoints``.
    """

    def __init__(self, app: Any) -> None:
        self.app = app
        super().__init__(
            f"No service container attached to {type(app).__name__}; "
            "pass one to map_endpoints() or call attach_container() first"
        )


class EndpointNotInitialized(EndpointError, RuntimeError):
    """Raised when an endpoint's application context is read before mapping.

    Attributes:
        endpoint: The endpoint instance.
    """

    def __init__(self, endpoint: Any) -> None:
        self.endpoint = endpoint
        super().__init__(f"Endpoint '{type(endpoint).__name__}' has not been mapped yet")


class NoEndpointsFound(EndpointError, LookupError):
    """Raised in strict mode when discovery finds no endpoint class.

    Attributes:
        marker: The marker class that was searched for.
    """

    def __init__(self, marker: type) -> None:
        self.marker = marker
        super().__init__(f"No concrete subclass of '{marker.__name__}' found")
