"""API version insertion for outgoing requests.

This module provides:
- Placement strategies (header, query parameter, path segment)
- An immutable inserter with a pluggable version formatter
- Client-level resolution of default and per-request versions

Example:
    ```python
    from api_version_client.request import RequestRepresentation
    from api_version_client.versioning import ApiVersionInserter, VersionContext

    context = VersionContext(default_version="1.2", inserter=ApiVersionInserter.use_query_param("api-version"))

    request = RequestRepresentation.from_path("/path")
    context.apply(request)
    assert request.target == "/path?api-version=1.2"
    ```
"""

from api_version_client.versioning.context import VersionContext
from api_version_client.versioning.exceptions import (
    ApiVersionError,
    ApiVersionMisconfigurationError,
    InserterConfigurationError,
    PathSegmentOutOfRangeError,
    VersionInsertionError,
)
from api_version_client.versioning.formatter import VersionFormatter, default_version_formatter
from api_version_client.versioning.inserter import ApiVersionInserter, ApiVersionInserterBuilder
from api_version_client.versioning.placement import (
    HeaderPlacement,
    InsertionStrategy,
    PathSegmentPlacement,
    QueryParamPlacement,
)

__all__ = [
    "ApiVersionError",
    "ApiVersionInserter",
    "ApiVersionInserterBuilder",
    "ApiVersionMisconfigurationError",
    "HeaderPlacement",
    "InserterConfigurationError",
    "InsertionStrategy",
    "PathSegmentOutOfRangeError",
    "PathSegmentPlacement",
    "QueryParamPlacement",
    "VersionContext",
    "VersionFormatter",
    "VersionInsertionError",
    "default_version_formatter",
]
