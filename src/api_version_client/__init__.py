"""API Version Client - stamp API versions onto outgoing httpx requests.

This library provides:
- Header, query parameter and path segment version placement
- Custom version formatting
- Client-wide default versions with per-request overrides
- Version-inserting transports for generated clients
- Environment-based versioning configuration

Example:
    ```python
    from api_version_client import ApiVersionClientBuilder, ApiVersionInserter

    inserter = ApiVersionInserter.builder().use_path_segment(0).with_version_formatter(lambda v: f"v{v}").build()

    async with (
        ApiVersionClientBuilder()
        .base_url("https://api.example.com")
        .default_api_version(2)
        .api_version_inserter(inserter)
        .build_async()
    ) as client:
        response = await client.get("/users")  # GET /v2/users
    ```
"""

from api_version_client.client import ApiVersionClient, ApiVersionClientBuilder, AsyncApiVersionClient
from api_version_client.request import RequestRepresentation
from api_version_client.versioning import (
    ApiVersionError,
    ApiVersionInserter,
    ApiVersionMisconfigurationError,
    InserterConfigurationError,
    PathSegmentOutOfRangeError,
    VersionContext,
)

__version__ = "0.1.0"

__all__ = [
    "ApiVersionClient",
    "ApiVersionClientBuilder",
    "ApiVersionError",
    "ApiVersionInserter",
    "ApiVersionMisconfigurationError",
    "AsyncApiVersionClient",
    "InserterConfigurationError",
    "PathSegmentOutOfRangeError",
    "RequestRepresentation",
    "VersionContext",
    "__version__",
]
