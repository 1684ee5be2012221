"""Testing utilities for API version clients.

Example:
    ```python
    from api_version_client import ApiVersionClientBuilder, ApiVersionInserter
    from api_version_client.testing import RequestRecorder


    def test_sends_version_header():
        recorder = RequestRecorder()
        client = (
            ApiVersionClientBuilder()
            .base_url("https://api.example.com")
            .transport(recorder.transport)
            .api_version_inserter(ApiVersionInserter.use_header("X-API-Version"))
            .build()
        )
        client.get("/path", api_version="1.2")
        assert recorder.last_request.headers["X-API-Version"] == "1.2"
    ```
"""

import httpx


class RequestRecorder:
    """Mock transport that records every request it receives.

    Works with both ``httpx.Client`` and ``httpx.AsyncClient``.

    Args:
        status_code: Status code of every response
        text: Body of every response
    """

    def __init__(self, status_code: int = 200, text: str = "body") -> None:
        self.status_code = status_code
        self.text = text
        self.requests: list[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status_code, text=self.text, headers={"Content-Type": "text/plain"})

    @property
    def last_request(self) -> httpx.Request:
        """The most recently recorded request."""
        if not self.requests:
            raise AssertionError("No requests were recorded")
        return self.requests[-1]


__all__ = ["RequestRecorder"]
