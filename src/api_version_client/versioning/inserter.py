"""API version inserter and its builder.

An ``ApiVersionInserter`` combines one placement strategy with a version
formatter. It holds no mutable state, so a single instance is built once
(usually when the client is configured) and shared by every request.

Example:
    ```python
    from api_version_client.versioning import ApiVersionInserter

    # Common case: default formatting
    inserter = ApiVersionInserter.use_header("X-API-Version")

    # Custom formatting via the builder
    inserter = ApiVersionInserter.builder().use_path_segment(0).with_version_formatter(lambda v: f"v{v}").build()
    ```
"""

import logging
from dataclasses import dataclass, field

from api_version_client.request import RequestRepresentation
from api_version_client.versioning.exceptions import InserterConfigurationError
from api_version_client.versioning.formatter import VersionFormatter, default_version_formatter
from api_version_client.versioning.placement import (
    HeaderPlacement,
    InsertionStrategy,
    PathSegmentPlacement,
    QueryParamPlacement,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiVersionInserter:
    """Immutable policy inserting a formatted API version into requests.

    Attributes:
        strategy: Where the version is placed on the request
        formatter: Converts the version value into its wire string
    """

    strategy: InsertionStrategy
    formatter: VersionFormatter = field(default=default_version_formatter)

    @classmethod
    def builder(cls) -> "ApiVersionInserterBuilder":
        """Start building an inserter with a custom formatter."""
        return ApiVersionInserterBuilder()

    @classmethod
    def use_header(cls, name: str) -> "ApiVersionInserter":
        """Create an inserter that sends the version in the given header."""
        return cls.builder().use_header(name).build()

    @classmethod
    def use_query_param(cls, name: str) -> "ApiVersionInserter":
        """Create an inserter that sends the version as the given query parameter."""
        return cls.builder().use_query_param(name).build()

    @classmethod
    def use_path_segment(cls, index: int) -> "ApiVersionInserter":
        """Create an inserter that inserts the version at the given path segment index."""
        return cls.builder().use_path_segment(index).build()

    def format_version(self, version: object) -> str:
        """Format a version with the configured formatter.

        Exceptions raised by the formatter propagate unchanged.
        """
        return self.formatter(version)

    def insert(self, version: object, request: RequestRepresentation) -> None:
        """Insert the version into the request.

        Not idempotent: header and query placements add one entry per call.

        Args:
            version: Opaque version value
            request: Request representation to modify

        Raises:
            PathSegmentOutOfRangeError: If a path segment placement does not fit the path
        """
        formatted = self.format_version(version)
        self.strategy.apply(formatted, request)
        logger.debug(f"Inserted API version {formatted!r} via {self.strategy.describe()}: {request.target}")


class ApiVersionInserterBuilder:
    """Accumulate the configuration of an ``ApiVersionInserter``.

    Exactly one of ``use_header``, ``use_query_param`` or ``use_path_segment``
    must be called. Choosing more than one placement, or none, fails in
    ``build()``.
    """

    def __init__(self) -> None:
        self._placements: list[tuple[type, object]] = []
        self._formatter: VersionFormatter = default_version_formatter

    def use_header(self, name: str) -> "ApiVersionInserterBuilder":
        """Place the version in the request header ``name``."""
        self._placements.append((HeaderPlacement, name))
        return self

    def use_query_param(self, name: str) -> "ApiVersionInserterBuilder":
        """Place the version in the query parameter ``name``."""
        self._placements.append((QueryParamPlacement, name))
        return self

    def use_path_segment(self, index: int) -> "ApiVersionInserterBuilder":
        """Insert the version as a path segment at zero-based ``index``."""
        self._placements.append((PathSegmentPlacement, index))
        return self

    def with_version_formatter(self, formatter: VersionFormatter) -> "ApiVersionInserterBuilder":
        """Use a custom formatter instead of ``str(version)``."""
        if not callable(formatter):
            raise InserterConfigurationError(f"Version formatter must be callable, got {formatter!r}")
        self._formatter = formatter
        return self

    def build(self) -> ApiVersionInserter:
        """Validate the configuration and create the inserter.

        Returns:
            Immutable ApiVersionInserter

        Raises:
            InserterConfigurationError: If zero or several placements were chosen,
                or the chosen placement is invalid
        """
        if not self._placements:
            raise InserterConfigurationError(
                "No API version placement configured: call use_header, use_query_param or use_path_segment"
            )

        strategies = [placement_cls(value) for placement_cls, value in self._placements]
        if len(strategies) > 1:
            described = ", ".join(strategy.describe() for strategy in strategies)
            raise InserterConfigurationError(f"Only one API version placement is allowed, got: {described}")

        return ApiVersionInserter(strategy=strategies[0], formatter=self._formatter)
