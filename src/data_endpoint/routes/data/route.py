"""Data endpoint."""

from fastapi.responses import PlainTextResponse

DATA_MESSAGE = "Here is your data!"


def get() -> PlainTextResponse:
    """Return the data message as plain text."""
    return PlainTextResponse(DATA_MESSAGE)
