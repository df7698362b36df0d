"""Start the data endpoint server."""

import logging

import uvicorn

from data_endpoint.config import Settings

logger = logging.getLogger("data_endpoint")


def main() -> None:
    """Read settings from the environment and serve the app with uvicorn.

    Raises:
        ConfigError: If a DATA_ENDPOINT_* variable is invalid.
    """
    settings = Settings.from_env()

    # uvicorn's "trace" sits below DEBUG and has no stdlib name
    level = "DEBUG" if settings.log_level == "trace" else settings.log_level.upper()
    logging.basicConfig(level=level)

    logger.info(
        "Starting server",
        extra={"host": settings.host, "port": settings.port},
    )

    uvicorn.run(
        "data_endpoint.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
