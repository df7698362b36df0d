"""Directory scanner for the route tree.

Walks the routes directory to discover route.py files and maps each
file's directory names to a URL path.
"""

import re
from dataclasses import dataclass
from pathlib import Path

from data_endpoint.exceptions import PathParseError, RouteDiscoveryError

ROUTE_FILE_NAME = "route.py"

_SEGMENT_PATTERN = re.compile(r"^[a-z][a-z0-9_-]*$")


@dataclass(frozen=True)
class RouteDefinition:
    """A discovered route file and the URL path it serves.

    Attributes:
        path: URL path string (e.g., /data)
        file_path: Absolute path to the route.py file
    """

    path: str
    file_path: Path


def scan_routes(base_path: Path | str) -> list[RouteDefinition]:
    """Scan a directory tree for route.py files.

    Args:
        base_path: Root directory of the route tree.

    Returns:
        List of RouteDefinition objects sorted by path.

    Raises:
        RouteDiscoveryError: If base_path doesn't exist or isn't a directory.
        PathParseError: If any directory name is not a valid URL segment.

    Examples:
        routes = scan_routes("routes")
        for route in routes:
            print(f"{route.path} -> {route.file_path}")
    """
    base = Path(base_path).resolve()

    if not base.exists():
        raise RouteDiscoveryError(f"Base path does not exist: {base}")
    if not base.is_dir():
        raise RouteDiscoveryError(f"Base path is not a directory: {base}")

    routes: list[RouteDefinition] = []

    for route_file in base.rglob(ROUTE_FILE_NAME):
        relative_dir = route_file.parent.relative_to(base)

        if "__pycache__" in relative_dir.parts:
            continue
        if any(part.startswith(".") for part in relative_dir.parts):
            continue

        # Symlinks must not lead out of the tree
        if not _is_path_within(route_file.resolve(), base):
            continue

        routes.append(
            RouteDefinition(
                path=_parts_to_path(relative_dir.parts),
                file_path=route_file,
            )
        )

    return sorted(routes, key=lambda r: r.path)


def parse_segment(segment: str) -> str:
    """Validate a directory name as a static URL segment.

    Args:
        segment: Directory name.

    Returns:
        The segment unchanged.

    Raises:
        PathParseError: If the name is empty or has invalid characters.
    """
    if not segment:
        raise PathParseError("Empty segment")
    if not _SEGMENT_PATTERN.match(segment):
        raise PathParseError(
            f"Invalid segment '{segment}': must match {_SEGMENT_PATTERN.pattern}"
        )
    return segment


def _parts_to_path(parts: tuple[str, ...]) -> str:
    return "/" + "/".join(parse_segment(part) for part in parts)


def _is_path_within(path: Path, base: Path) -> bool:
    try:
        path.relative_to(base)
        return True
    except ValueError:
        return False
