"""Exceptions raised while configuring or applying API version insertion.

Build-time problems (no placement, two placements, a negative path segment
index) raise ``InserterConfigurationError`` from ``ApiVersionInserterBuilder.build()``.
Request-time problems abort construction of that single request.

Example:
    ```python
    from api_version_client.versioning.exceptions import PathSegmentOutOfRangeError

    try:
        inserter.insert("1.2", request)
    except PathSegmentOutOfRangeError as e:
        print(f"Path {e.path} has no segment slot {e.index}")
    ```
"""


class ApiVersionError(Exception):
    """Base exception for API version insertion errors.

    All versioning exceptions inherit from this class, making it easy to
    catch any versioning-related error.
    """

    pass


class InserterConfigurationError(ApiVersionError, ValueError):
    """Raised when an inserter cannot be built from the given configuration."""

    pass


class VersionInsertionError(ApiVersionError):
    """Base exception for failures while inserting a version into a request."""

    pass


class PathSegmentOutOfRangeError(VersionInsertionError):
    """Raised when the configured path segment index exceeds the request path.

    Attributes:
        path: The request path before insertion was attempted.
        index: The configured path segment index.
    """

    def __init__(self, path: str, index: int):
        """Initialize PathSegmentOutOfRangeError.

        Args:
            path: The original (pre-insertion) request path.
            index: The path segment index that could not be used.
        """
        super().__init__(f"Cannot insert version into '{path}' at path segment index {index}")
        self.path = path
        self.index = index


class ApiVersionMisconfigurationError(ApiVersionError):
    """Raised when a request has an API version but the client has no inserter."""

    def __init__(self, message: str, version: object = None):
        super().__init__(message)
        self.version = version
