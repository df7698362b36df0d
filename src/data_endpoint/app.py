"""ASGI application for the data endpoint.

Run with:
    uvicorn data_endpoint.app:app

or through ``python -m data_endpoint``, which reads DATA_ENDPOINT_* settings.
"""

from pathlib import Path

from fastapi import FastAPI

from data_endpoint.router import create_router_from_path

ROUTES_DIR = Path(__file__).parent / "routes"


def create_app(routes_dir: Path = ROUTES_DIR) -> FastAPI:
    """Build a FastAPI instance wired to the given routes directory.

    Docs and the OpenAPI schema are not served, so the route tree is the
    only thing the app answers.
    """
    application = FastAPI(
        title="Data Endpoint",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    application.include_router(create_router_from_path(routes_dir))
    return application


app = create_app()
