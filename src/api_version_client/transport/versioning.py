"""Transports that insert the API version into every request they send.

Use these with generated clients that accept an httpx transport but know
nothing about API versioning. The per-request override is read from the
``api_version`` request extension.

## AsyncApiVersionTransport Example

```python
import httpx

from api_version_client.transport.versioning import AsyncApiVersionTransport
from api_version_client.versioning import ApiVersionInserter, VersionContext

transport = AsyncApiVersionTransport(
    wrapped_transport=httpx.AsyncHTTPTransport(),
    context=VersionContext(default_version="2024-01-01", inserter=ApiVersionInserter.use_header("X-API-Version")),
)

async with httpx.AsyncClient(transport=transport) as client:
    # Sent with X-API-Version: 2024-06-01
    response = await client.get("https://api.example.com/items", extensions={"api_version": "2024-06-01"})
```
"""

import logging

import httpx

from api_version_client.versioning.context import VersionContext

logger = logging.getLogger(__name__)

API_VERSION_EXTENSION = "api_version"


class ApiVersionTransport(httpx.BaseTransport):
    """Synchronous transport inserting the API version before delegating.

    Args:
        wrapped_transport: The underlying transport to wrap
        context: Default version and inserter applied to each request
    """

    def __init__(self, *, wrapped_transport: httpx.BaseTransport, context: VersionContext) -> None:
        self._wrapped_transport = wrapped_transport
        self.context = context

    def __enter__(self):
        """Enter context, delegating to wrapped transport."""
        self._wrapped_transport.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context, delegating to wrapped transport."""
        return self._wrapped_transport.__exit__(exc_type, exc_val, exc_tb)

    def handle_request(self, request: httpx.Request) -> httpx.Response:
        self.context.apply_to_httpx(request, request.extensions.get(API_VERSION_EXTENSION))
        logger.debug(f"Sending {request.method} {request.url}")
        return self._wrapped_transport.handle_request(request)

    def close(self) -> None:
        self._wrapped_transport.close()


class AsyncApiVersionTransport(httpx.AsyncBaseTransport):
    """Asynchronous transport inserting the API version before delegating.

    Args:
        wrapped_transport: The underlying transport to wrap
        context: Default version and inserter applied to each request
    """

    def __init__(self, *, wrapped_transport: httpx.AsyncBaseTransport, context: VersionContext) -> None:
        self._wrapped_transport = wrapped_transport
        self.context = context

    async def __aenter__(self):
        """Enter async context, delegating to wrapped transport."""
        await self._wrapped_transport.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Exit async context, delegating to wrapped transport."""
        return await self._wrapped_transport.__aexit__(exc_type, exc_val, exc_tb)

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.context.apply_to_httpx(request, request.extensions.get(API_VERSION_EXTENSION))
        logger.debug(f"Sending {request.method} {request.url}")
        return await self._wrapped_transport.handle_async_request(request)

    async def aclose(self) -> None:
        await self._wrapped_transport.aclose()
