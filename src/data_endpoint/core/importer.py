"""Module importer for route files.

Dynamically imports route.py modules and extracts HTTP method handlers.
Validates that only allowed exports (HTTP verbs) are present.
"""

import hashlib
import importlib.util
import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from types import ModuleType
from typing import Any

from data_endpoint.core.scanner import ROUTE_FILE_NAME
from data_endpoint.exceptions import RouteValidationError

# HTTP methods that can be exported from route.py files
ALLOWED_HANDLERS: frozenset[str] = frozenset(
    {
        "get",
        "post",
        "put",
        "patch",
        "delete",
        "head",
        "options",
    }
)

_MODULE_PREFIX = "_data_endpoint_route_"


@dataclass(frozen=True)
class ExtractedRoute:
    """Handlers extracted from a route.py module.

    Attributes:
        handlers: Dictionary mapping HTTP method names to handler functions.
    """

    handlers: dict[str, Callable[..., Any]]


def _validate_file_path(file_path: Path, *, base_path: Path | None = None) -> Path:
    """Validate a route file path and resolve it.

    Raises:
        RouteValidationError: If the path is invalid or escapes base_path.
    """
    if ".." in file_path.parts:
        raise RouteValidationError(f"Path traversal detected in file path: {file_path}")

    resolved_path = file_path.resolve()

    if base_path is not None:
        resolved_base = base_path.resolve()
        try:
            resolved_path.relative_to(resolved_base)
        except ValueError:
            raise RouteValidationError(
                f"Route file outside allowed directory: {resolved_path}\n"
                f"Allowed base: {resolved_base}"
            ) from None

    if resolved_path.name != ROUTE_FILE_NAME:
        raise RouteValidationError(f"Invalid route file name: {resolved_path.name}")

    return resolved_path


def _path_to_module_name(file_path: Path) -> str:
    """Derive a deterministic, flat module name from a resolved file path.

    The digest keeps files from different trees apart; the readable tail
    helps when the name shows up in a traceback.
    """
    digest = hashlib.sha1(str(file_path).encode()).hexdigest()[:12]
    tail = "_".join(file_path.parent.parts[-2:])
    safe_tail = "".join(c if c.isalnum() else "_" for c in tail)
    return f"{_MODULE_PREFIX}{digest}_{safe_tail}"


def import_route_module(file_path: Path, *, base_path: Path | None = None) -> ModuleType:
    """Import a route.py file as a Python module.

    Args:
        file_path: Path to the route.py file.
        base_path: Optional base directory to restrict imports to.

    Returns:
        The imported module. Repeated calls return the cached module.

    Raises:
        RouteValidationError: If the path is invalid, file doesn't exist,
            or import fails.
    """
    validated_path = _validate_file_path(file_path, base_path=base_path)

    if not validated_path.exists():
        raise RouteValidationError(f"Route file does not exist: {validated_path}")

    module_name = _path_to_module_name(validated_path)
    if module_name in sys.modules:
        return sys.modules[module_name]

    spec = importlib.util.spec_from_file_location(module_name, validated_path)
    if spec is None or spec.loader is None:
        raise RouteValidationError(f"Cannot create module spec for: {validated_path}")

    module = importlib.util.module_from_spec(spec)
    sys.modules[module_name] = module

    try:
        spec.loader.exec_module(module)
    except Exception as exc:
        del sys.modules[module_name]
        raise RouteValidationError(
            f"Failed to import module: {validated_path}\nError: {type(exc).__name__}: {exc}"
        ) from exc

    return module


def extract_handlers(module: ModuleType, file_path: Path) -> ExtractedRoute:
    """Extract HTTP method handlers from a route module.

    Args:
        module: The imported route module.
        file_path: Path to the route file (for error messages).

    Returns:
        ExtractedRoute containing the handlers.

    Raises:
        RouteValidationError: If public callables other than HTTP verbs
            are defined in the module.
    """
    handlers: dict[str, Callable[..., Any]] = {}
    invalid_exports: list[str] = []

    for name in dir(module):
        # Private helpers and dunders
        if name.startswith("_"):
            continue

        # Constants (DATA_MESSAGE, ...)
        if name.isupper():
            continue

        obj = getattr(module, name)

        if not callable(obj):
            continue

        # Imported classes and functions belong to their own module
        if getattr(obj, "__module__", None) != module.__name__:
            continue

        if name.lower() in ALLOWED_HANDLERS:
            handlers[name.lower()] = obj
        else:
            invalid_exports.append(name)

    if invalid_exports:
        raise RouteValidationError(
            f"Invalid export(s) {invalid_exports} in route.py\n"
            f"  File: {file_path}\n"
            f"  Hint: Only HTTP verbs ({', '.join(sorted(ALLOWED_HANDLERS))}) are allowed.\n"
            f"        Prefix helper functions with underscore: _{invalid_exports[0]}"
        )

    return ExtractedRoute(handlers=handlers)


def load_route(file_path: Path, *, base_path: Path | None = None) -> ExtractedRoute:
    """Import a route.py file and extract its handlers (convenience function)."""
    module = import_route_module(file_path, base_path=base_path)
    return extract_handlers(module, file_path)
