"""Versioning settings loaded from the environment.

Environment variables (shown with the default ``API_`` prefix):

| Variable | Meaning |
|----------|---------|
| `API_VERSION` | Client-wide default version |
| `API_VERSION_HEADER` | Send the version in this header |
| `API_VERSION_QUERY_PARAM` | Send the version as this query parameter |
| `API_VERSION_PATH_SEGMENT` | Insert the version at this path segment index |
| `API_VERSION_PREFIX` | Prefix added when formatting the version (e.g. `v`) |

At most one of the placement variables may be set.

Example:
    ```python
    from api_version_client.config import VersioningSettings

    settings = VersioningSettings.from_env(prefix="BILLING_")
    context = settings.build_context()
    ```
"""

import logging
from dataclasses import dataclass

from api_version_client.config.resolver import SettingResolver
from api_version_client.versioning.context import VersionContext
from api_version_client.versioning.inserter import ApiVersionInserter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VersioningSettings:
    """Declarative versioning configuration for a client."""

    default_version: str | None = None
    header: str | None = None
    query_param: str | None = None
    path_segment: int | None = None
    version_prefix: str | None = None

    @classmethod
    def from_env(cls, prefix: str = "API_", resolver: SettingResolver | None = None) -> "VersioningSettings":
        """Load settings from environment variables (and .env).

        Args:
            prefix: Prefix of every variable name
            resolver: Resolver to use; a default one loading .env is created if omitted

        Returns:
            VersioningSettings with whatever was found

        Raises:
            SettingValueError: If the path segment variable is not an integer
        """
        resolver = resolver or SettingResolver()
        settings = cls(
            default_version=resolver.resolve(env_var_name=f"{prefix}VERSION"),
            header=resolver.resolve(env_var_name=f"{prefix}VERSION_HEADER"),
            query_param=resolver.resolve(env_var_name=f"{prefix}VERSION_QUERY_PARAM"),
            path_segment=resolver.resolve_int(env_var_name=f"{prefix}VERSION_PATH_SEGMENT"),
            version_prefix=resolver.resolve(env_var_name=f"{prefix}VERSION_PREFIX"),
        )
        logger.debug(f"Loaded versioning settings with prefix '{prefix}': {settings}")
        return settings

    def build_inserter(self) -> ApiVersionInserter | None:
        """Create the configured inserter, or None when no placement is set.

        Raises:
            InserterConfigurationError: If several placements are set or one is invalid
        """
        if self.header is None and self.query_param is None and self.path_segment is None:
            return None

        builder = ApiVersionInserter.builder()
        if self.header is not None:
            builder.use_header(self.header)
        if self.query_param is not None:
            builder.use_query_param(self.query_param)
        if self.path_segment is not None:
            builder.use_path_segment(self.path_segment)
        if self.version_prefix:
            version_prefix = self.version_prefix
            builder.with_version_formatter(lambda version: f"{version_prefix}{version}")
        return builder.build()

    def build_context(self) -> VersionContext:
        """Create the client-level version context described by these settings."""
        return VersionContext(default_version=self.default_version, inserter=self.build_inserter())
