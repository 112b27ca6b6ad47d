# Copyright 2025 Softwell S.r.l.
# Licensed under the Apache License, Version 2.0

"""Endpoint class discovery.

Discovery works on classes already loaded in the interpreter: it walks
``marker.__subclasses__()`` transitively and keeps the concrete ones.
``import_packages`` loads a package tree first so that endpoint modules
nobody imported yet take part.

Rules
-----
- Abstract classes (``inspect.isabstract``) are skipped, their subclasses
  are still visited.
- A class reachable through several bases is returned once.
- Order is depth-first following ``__subclasses__()``, which preserves
  definition order. Metaclasses such as ``type`` work as markers too.
- With ``packages``, only classes whose ``__module__`` is one of the
  packages or lives beneath one of them are kept.
"""

from __future__ import annotations

import inspect
import logging
import pkgutil
from collections.abc import Iterable, Iterator
from importlib import import_module
from types import ModuleType

from genro_endpoints.exceptions import InvalidMarker

from .endpoint import EndpointBase

__all__ = ["discover_endpoints", "import_packages", "iter_subclasses"]

logger = logging.getLogger("genro_endpoints")

PackageSpec = str | ModuleType


def import_packages(*packages: PackageSpec) -> list[ModuleType]:
    """Import packages and all their submodules.

    Args:
        *packages: Dotted names or already imported modules. Plain modules
            are imported as they are; packages are walked recursively.

    Returns:
        Every module imported, roots first.
    """
    modules: list[ModuleType] = []
    for spec in packages:
        root = import_module(spec) if isinstance(spec, str) else spec
        modules.append(root)
        path = getattr(root, "__path__", None)
        if path is None:
            continue
        for info in pkgutil.walk_packages(path, prefix=f"{root.__name__}."):
            logger.debug("importing %s", info.name)
            modules.append(import_module(info.name))
    return modules


def iter_subclasses(cls: type) -> Iterator[type]:
    """Yield every subclass of ``cls``, depth-first, each class once."""
    seen: set[type] = set()
    stack = list(reversed(type.__subclasses__(cls)))
    while stack:
        sub = stack.pop()
        if sub in seen:
            continue
        seen.add(sub)
        yield sub
        stack.extend(reversed(type.__subclasses__(sub)))


def _module_names(packages: Iterable[PackageSpec]) -> tuple[str, ...]:
    return tuple(spec if isinstance(spec, str) else spec.__name__ for spec in packages)


def _in_packages(cls: type, names: tuple[str, ...]) -> bool:
    module = cls.__module__
    return any(module == name or module.startswith(f"{name}.") for name in names)


def discover_endpoints(
    marker: type = EndpointBase, packages: Iterable[PackageSpec] = ()
) -> list[type]:
    """Return the concrete endpoint classes implementing ``marker``.

    Args:
        marker: Marker contract, ``EndpointBase`` by default.
        packages: Optional packages to import and restrict discovery to.

    Raises:
        InvalidMarker: If ``marker`` is not a class.
    """
    if not inspect.isclass(marker):
        raise InvalidMarker(marker)
    packages = tuple(packages)
    if packages:
        import_packages(*packages)
    names = _module_names(packages)
    found = []
    for cls in iter_subclasses(marker):
        if inspect.isabstract(cls):
            continue
        if names and not _in_packages(cls, names):
            continue
        found.append(cls)
    return found
