"""GET /data under concurrent load.

Fires many simultaneous requests and verifies every response is the
same 200 with the same body.
"""

import asyncio

import httpx

CONCURRENT_REQUESTS = 100

DATA_MESSAGE = "Here is your data!"


class TestConcurrentRequests:
    """Verify concurrent requests do not interfere."""

    async def test_identical_responses(self, client: httpx.AsyncClient) -> None:
        """N concurrent GET /data yield N identical 200 responses."""
        responses = await asyncio.gather(
            *(client.get("/data") for _ in range(CONCURRENT_REQUESTS))
        )

        assert len(responses) == CONCURRENT_REQUESTS
        assert {response.status_code for response in responses} == {200}
        assert {response.content for response in responses} == {DATA_MESSAGE.encode()}

    async def test_mixed_requests_keep_their_own_status(
        self, client: httpx.AsyncClient
    ) -> None:
        """Concurrent bad requests do not leak into good ones."""
        requests = []
        for i in range(CONCURRENT_REQUESTS):
            match i % 3:
                case 0:
                    requests.append(("GET", "/data", 200))
                case 1:
                    requests.append(("POST", "/data", 405))
                case _:
                    requests.append(("GET", f"/missing-{i}", 404))

        responses = await asyncio.gather(
            *(client.request(method, url) for method, url, _ in requests)
        )

        for (method, url, expected), response in zip(requests, responses, strict=True):
            assert response.status_code == expected, (
                f"{method} {url} returned {response.status_code}"
            )
            if expected == 200:
                assert response.text == DATA_MESSAGE
