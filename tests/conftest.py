"""Shared pytest fixtures for data-endpoint tests."""

from pathlib import Path
from typing import Any

import pytest

DATA_MESSAGE = "Here is your data!"


@pytest.fixture
def create_route_file(tmp_path: Path):
    """Create a route.py file with given content in a directory.

    Returns a callable that accepts:
    - content: Python code as string
    - parent_dir: Path to parent directory (defaults to tmp_path)
    - subdir: Optional subdirectory name (e.g., "data" or "api/v1")

    Returns the Path to the created route.py file.
    """

    def _create(
        content: str,
        parent_dir: Path | None = None,
        subdir: str = "",
    ) -> Path:
        base = parent_dir or tmp_path
        if subdir:
            target_dir = base / subdir
            target_dir.mkdir(parents=True, exist_ok=True)
        else:
            target_dir = base

        route_file = target_dir / "route.py"
        route_file.write_text(content)
        return route_file

    return _create


@pytest.fixture
def create_route_tree(tmp_path: Path, create_route_file):
    """Create a directory tree with route.py files from a dict specification.

    Keys are directory names; values are either route.py content (str)
    or nested dicts for subdirectories.

    Example:
        {
            "data": "def get(): return 'x'",
            "api": {"v1": "def get(): return {}"},
        }

    Returns the tmp_path root containing the tree.
    """

    def _create(spec: dict[str, Any], parent_dir: Path | None = None) -> Path:
        base = parent_dir or tmp_path

        for key, value in spec.items():
            if isinstance(value, str):
                create_route_file(content=value, parent_dir=base, subdir=key)
            elif isinstance(value, dict):
                subdir = base / key
                subdir.mkdir(parents=True, exist_ok=True)
                _create(value, parent_dir=subdir)
            else:
                msg = f"Invalid spec value type: {type(value)}"
                raise TypeError(msg)

        return base

    return _create


@pytest.fixture
def data_route_handler() -> str:
    """Return a route file equivalent to the shipped /data route."""
    return f"""
from fastapi.responses import PlainTextResponse

def get():
    return PlainTextResponse({DATA_MESSAGE!r})
"""


@pytest.fixture
def multi_method_handler() -> str:
    """Return a route handler with multiple HTTP methods."""
    return """
def get():
    return {"method": "GET"}

def post():
    return {"method": "POST"}

def delete():
    return {"method": "DELETE"}
"""
