"""A single HTTP endpoint that serves a fixed message at GET /data.

The ASGI application lives in :mod:`data_endpoint.app`; importing this
package does not build it.
"""

# Primary API
from data_endpoint.config import Settings

# Core types
from data_endpoint.core.importer import ExtractedRoute
from data_endpoint.core.scanner import RouteDefinition

# Exceptions
from data_endpoint.exceptions import (
    ConfigError,
    DataEndpointError,
    PathParseError,
    RouteDiscoveryError,
    RouteValidationError,
)
from data_endpoint.router import create_router_from_path

__all__ = [
    # Primary API
    "create_router_from_path",
    "Settings",
    # Core types
    "ExtractedRoute",
    "RouteDefinition",
    # Exceptions
    "ConfigError",
    "DataEndpointError",
    "PathParseError",
    "RouteDiscoveryError",
    "RouteValidationError",
]

__version__ = "1.0.0"
