"""Router factory for the route tree.

Composes scanner and importer to create a FastAPI router from a
directory of route.py files.
"""

import logging
from pathlib import Path

from fastapi import APIRouter

from data_endpoint.core.importer import load_route
from data_endpoint.core.scanner import RouteDefinition, scan_routes

logger = logging.getLogger(__name__)


def create_router_from_path(base_path: str | Path) -> APIRouter:
    """Create a FastAPI APIRouter from a directory of route.py files.

    Args:
        base_path: Root directory containing route.py files.

    Returns:
        A FastAPI APIRouter with all discovered routes registered.

    Raises:
        RouteDiscoveryError: If base_path doesn't exist or isn't a directory.
        PathParseError: If a directory name has invalid syntax.
        RouteValidationError: If a route file has invalid exports or fails to import.

    Example:
        app = FastAPI()
        app.include_router(create_router_from_path("routes"))
    """
    base = Path(base_path).resolve()

    route_defs = scan_routes(base)

    logger.info(
        "Discovered route files",
        extra={"count": len(route_defs), "base_path": str(base)},
    )

    router = APIRouter()
    route_count = _register_route_handlers(router, route_defs, base)

    logger.info(
        "Route registration complete",
        extra={"route_count": route_count},
    )

    return router


def _register_route_handlers(
    router: APIRouter,
    route_defs: list[RouteDefinition],
    base_path: Path,
) -> int:
    """Load every route file and register its handlers on the router.

    Each handler answers only its own method, so other methods on the
    same path get the framework's 405.

    Returns:
        Number of (path, method) routes registered.
    """
    route_count = 0

    for route_def in route_defs:
        extracted = load_route(route_def.file_path, base_path=base_path)

        if not extracted.handlers:
            logger.debug(
                "Skipping route file without handlers",
                extra={"file": str(route_def.file_path)},
            )
            continue

        for method, handler in sorted(extracted.handlers.items()):
            router.add_api_route(
                path=route_def.path,
                endpoint=handler,
                methods=[method.upper()],
            )
            route_count += 1

            logger.debug(
                "Registered route",
                extra={
                    "method": method.upper(),
                    "path": route_def.path,
                    "file": str(route_def.file_path),
                },
            )

    return route_count
