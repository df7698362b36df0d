"""Exception hierarchy for data-endpoint startup errors."""


class DataEndpointError(Exception):
    """Base exception for all data-endpoint errors.

    Every error the service raises happens while the application is
    being built, never while a request is served. Catching this
    exception catches all of them.

    Example:
        try:
            app = create_app(routes_dir)
        except DataEndpointError as e:
            logger.error(f"Failed to build app: {e}")
    """


class ConfigError(DataEndpointError):
    """Raised when an environment variable holds an invalid value.

    Example:
        ConfigError("DATA_ENDPOINT_PORT must be an integer, got 'http'")
    """


class PathParseError(DataEndpointError):
    """Raised when a directory name in the route tree is not a valid URL segment.

    Segment names must be lowercase, start with a letter and contain only
    letters, digits, underscores or hyphens.

    Example:
        PathParseError("Invalid segment 'Data': must match ^[a-z][a-z0-9_-]*$")
    """


class RouteDiscoveryError(DataEndpointError):
    """Raised when the routes directory doesn't exist or isn't a directory.

    Example:
        RouteDiscoveryError("Base path does not exist: /srv/routes")
    """


class RouteValidationError(DataEndpointError):
    """Raised for an invalid route file.

    Covers:
        - Path traversal or files outside the routes directory
        - Files not named route.py
        - Import or syntax errors inside the route file
        - Public functions that are not HTTP method handlers
    """
