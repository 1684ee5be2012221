"""Transport layers for composing API versioning into httpx clients.

Transport layers wrap another httpx transport and insert the API version
into each request before delegating, for generated clients that only
accept a transport.

Modules:
    versioning: Sync and async version-inserting transports

Example:
    ```python
    import httpx

    from api_version_client.transport import AsyncApiVersionTransport
    from api_version_client.versioning import ApiVersionInserter, VersionContext

    transport = AsyncApiVersionTransport(
        wrapped_transport=httpx.AsyncHTTPTransport(),
        context=VersionContext(default_version="1.2", inserter=ApiVersionInserter.use_query_param("api-version")),
    )
    ```
"""

from api_version_client.transport.versioning import (
    API_VERSION_EXTENSION,
    ApiVersionTransport,
    AsyncApiVersionTransport,
)

__all__ = ["API_VERSION_EXTENSION", "ApiVersionTransport", "AsyncApiVersionTransport"]
