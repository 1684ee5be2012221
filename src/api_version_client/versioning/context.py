"""Client-level resolution of the effective API version for each request.

Resolution order (first match wins):
1. Per-request override
2. Client-wide default version
3. No version: the request passes through untouched
"""

from dataclasses import dataclass

import httpx

from api_version_client.request import RequestRepresentation
from api_version_client.versioning.exceptions import ApiVersionMisconfigurationError
from api_version_client.versioning.inserter import ApiVersionInserter


@dataclass(frozen=True)
class VersionContext:
    """Immutable versioning configuration captured when a client is built.

    Attributes:
        default_version: Version applied when a request has no override
        inserter: Inserter used to place the effective version on requests
    """

    default_version: object = None
    inserter: ApiVersionInserter | None = None

    def resolve(self, override: object = None) -> object:
        """Return the effective version: the override, else the default, else None."""
        if override is not None:
            return override
        return self.default_version

    def apply(self, request: RequestRepresentation, override: object = None) -> object:
        """Insert the effective version into a request.

        Must run once per request, after its path, query and headers are final.

        Args:
            request: Request representation to modify
            override: Per-request version, taking precedence over the default

        Returns:
            The effective version that was applied, or None if there was none

        Raises:
            ApiVersionMisconfigurationError: If a version is present but no inserter is configured
            PathSegmentOutOfRangeError: If the inserter's path segment does not fit the path
        """
        version = self.resolve(override)
        if version is None:
            return None

        self._insert(version, request)
        return version

    def apply_to_httpx(self, request: httpx.Request, override: object = None) -> object:
        """Insert the effective version into a finalized httpx request, in place.

        Args:
            request: Request whose URL, query and headers are already merged
            override: Per-request version, taking precedence over the default

        Returns:
            The effective version that was applied, or None if there was none
        """
        version = self.resolve(override)
        if version is None:
            return None

        representation = RequestRepresentation.from_httpx(request)
        self._insert(version, representation)
        representation.apply_to(request)
        return version

    def _insert(self, version: object, request: RequestRepresentation) -> None:
        if self.inserter is None:
            raise ApiVersionMisconfigurationError(
                f"No ApiVersionInserter configured for API version {version!r}", version=version
            )
        self.inserter.insert(version, request)
