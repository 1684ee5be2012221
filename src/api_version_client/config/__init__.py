"""Configuration loading for API version clients.

This module provides:
- Multi-source setting resolution (value → env → .env → default)
- Versioning settings that build inserters and version contexts

Example:
    ```python
    from api_version_client.config import VersioningSettings

    settings = VersioningSettings.from_env()
    inserter = settings.build_inserter()
    ```
"""

from api_version_client.config.exceptions import SettingError, SettingNotFoundError, SettingValueError
from api_version_client.config.resolver import SettingResolver
from api_version_client.config.settings import VersioningSettings

__all__ = [
    "SettingError",
    "SettingNotFoundError",
    "SettingResolver",
    "SettingValueError",
    "VersioningSettings",
]
