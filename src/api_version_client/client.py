"""HTTP clients that stamp an API version onto every outgoing request.

The builder captures the client-wide configuration once. Each request then
resolves its effective version (per-request ``api_version`` override, else
the client default) and inserts it after httpx has merged the base URL,
default headers and query parameters, so path segment indexes always refer
to the final request path.

Example:
    ```python
    from api_version_client import ApiVersionClientBuilder, ApiVersionInserter

    client = (
        ApiVersionClientBuilder()
        .base_url("https://api.example.com")
        .default_api_version("1.2")
        .api_version_inserter(ApiVersionInserter.use_header("X-API-Version"))
        .build()
    )

    client.get("/path")  # X-API-Version: 1.2
    client.get("/path", api_version="2.0")  # X-API-Version: 2.0
    ```
"""

import logging
from typing import Any

import httpx

from api_version_client.config.settings import VersioningSettings
from api_version_client.versioning.context import VersionContext
from api_version_client.versioning.inserter import ApiVersionInserter

logger = logging.getLogger(__name__)

# Options httpx applies in send() rather than build_request()
SEND_OPTIONS = ("auth", "follow_redirects", "stream")


class ApiVersionClientBuilder:
    """Accumulate client configuration and build sync or async clients.

    Clients built from the builder are unaffected by later builder changes.
    """

    def __init__(self) -> None:
        self._base_url: str = ""
        self._headers: dict[str, str] = {}
        self._default_version: object = None
        self._inserter: ApiVersionInserter | None = None
        self._transport: httpx.BaseTransport | httpx.AsyncBaseTransport | None = None
        self._timeout: float | None = None

    def base_url(self, url: str) -> "ApiVersionClientBuilder":
        self._base_url = url
        return self

    def default_header(self, name: str, value: str) -> "ApiVersionClientBuilder":
        self._headers[name] = value
        return self

    def default_api_version(self, version: object) -> "ApiVersionClientBuilder":
        """Set the version used by requests that do not pass their own."""
        self._default_version = version
        return self

    def api_version_inserter(self, inserter: ApiVersionInserter) -> "ApiVersionClientBuilder":
        """Set how the effective version is placed on each request."""
        self._inserter = inserter
        return self

    def settings(self, settings: VersioningSettings) -> "ApiVersionClientBuilder":
        """Apply versioning settings, e.g. loaded with ``VersioningSettings.from_env()``.

        Only values present in the settings override the builder's state.
        """
        if settings.default_version is not None:
            self._default_version = settings.default_version
        inserter = settings.build_inserter()
        if inserter is not None:
            self._inserter = inserter
        return self

    def transport(self, transport: httpx.BaseTransport | httpx.AsyncBaseTransport) -> "ApiVersionClientBuilder":
        self._transport = transport
        return self

    def timeout(self, seconds: float) -> "ApiVersionClientBuilder":
        self._timeout = seconds
        return self

    def _version_context(self) -> VersionContext:
        return VersionContext(default_version=self._default_version, inserter=self._inserter)

    def _client_kwargs(self) -> dict[str, Any]:
        kwargs: dict[str, Any] = {"base_url": self._base_url, "headers": dict(self._headers)}
        if self._transport is not None:
            kwargs["transport"] = self._transport
        if self._timeout is not None:
            kwargs["timeout"] = self._timeout
        return kwargs

    def build(self) -> "ApiVersionClient":
        """Build a synchronous client backed by ``httpx.Client``."""
        return ApiVersionClient(httpx.Client(**self._client_kwargs()), self._version_context())

    def build_async(self) -> "AsyncApiVersionClient":
        """Build an asynchronous client backed by ``httpx.AsyncClient``."""
        return AsyncApiVersionClient(httpx.AsyncClient(**self._client_kwargs()), self._version_context())


def _pop_send_options(kwargs: dict[str, Any]) -> dict[str, Any]:
    """Split the options httpx applies when sending from those used to build the request."""
    return {name: kwargs.pop(name) for name in SEND_OPTIONS if name in kwargs}


class _VersionedRequests:
    """Request construction shared by the sync and async clients."""

    def __init__(self, http_client: httpx.Client | httpx.AsyncClient, context: VersionContext) -> None:
        self._http_client = http_client
        self.context = context

    @property
    def http_client(self) -> httpx.Client | httpx.AsyncClient:
        return self._http_client

    def build_request(self, method: str, url: str, *, api_version: object = None, **kwargs: Any) -> httpx.Request:
        """Build a request and insert its effective API version.

        Args:
            method: HTTP method
            url: URL or path relative to the base URL
            api_version: One-shot override of the client's default version
            **kwargs: Passed to ``httpx.Client.build_request`` (params, headers, cookies,
                content, data, files, json, timeout, extensions)

        Returns:
            The finalized request, ready to send

        Raises:
            ApiVersionMisconfigurationError: If a version is present but no inserter is configured
            PathSegmentOutOfRangeError: If the inserter's path segment does not fit the path
        """
        request = self._http_client.build_request(method, url, **kwargs)
        version = self.context.apply_to_httpx(request, api_version)
        if version is not None:
            logger.debug(f"Built {request.method} {request.url} with API version {version!r}")
        return request


class ApiVersionClient(_VersionedRequests):
    """Synchronous client applying API versions to each request."""

    _http_client: httpx.Client

    def __enter__(self) -> "ApiVersionClient":
        self._http_client.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self._http_client.__exit__(exc_type, exc_val, exc_tb)

    def close(self) -> None:
        self._http_client.close()

    def request(self, method: str, url: str, *, api_version: object = None, **kwargs: Any) -> httpx.Response:
        """Build, version and send a request.

        Insertion errors are raised before anything is sent.
        """
        send_kwargs = _pop_send_options(kwargs)
        request = self.build_request(method, url, api_version=api_version, **kwargs)
        return self._http_client.send(request, **send_kwargs)

    def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("POST", url, **kwargs)

    def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("PUT", url, **kwargs)

    def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("PATCH", url, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return self.request("DELETE", url, **kwargs)


class AsyncApiVersionClient(_VersionedRequests):
    """Asynchronous client applying API versions to each request."""

    _http_client: httpx.AsyncClient

    async def __aenter__(self) -> "AsyncApiVersionClient":
        await self._http_client.__aenter__()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self._http_client.__aexit__(exc_type, exc_val, exc_tb)

    async def aclose(self) -> None:
        await self._http_client.aclose()

    async def request(self, method: str, url: str, *, api_version: object = None, **kwargs: Any) -> httpx.Response:
        """Build, version and send a request.

        Insertion errors are raised before anything is sent.
        """
        send_kwargs = _pop_send_options(kwargs)
        request = self.build_request(method, url, api_version=api_version, **kwargs)
        return await self._http_client.send(request, **send_kwargs)

    async def get(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs: Any) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)
