"""Shared fixtures for concurrency integration tests."""

import httpx
import pytest
from fastapi import FastAPI

from data_endpoint.app import create_app


@pytest.fixture
def app() -> FastAPI:
    return create_app()


@pytest.fixture
async def client(app: FastAPI):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client
