"""Exceptions for resolving client configuration settings.

Example:
    ```python
    from api_version_client.config.exceptions import SettingNotFoundError

    try:
        version = resolver.resolve(env_var_name="API_VERSION", required=True)
    except SettingNotFoundError as e:
        print(f"Missing setting: {e.env_var_name}")
    ```
"""


class SettingError(Exception):
    """Base exception for configuration setting errors."""

    pass


class SettingNotFoundError(SettingError):
    """Raised when a required setting cannot be resolved from any source.

    Attributes:
        env_var_name: The environment variable name that was checked (if any).
    """

    def __init__(self, message: str, env_var_name: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name


class SettingValueError(SettingError, ValueError):
    """Raised when a setting is present but cannot be parsed.

    Attributes:
        env_var_name: The environment variable the raw value came from (if any).
        raw_value: The value that failed to parse.
    """

    def __init__(self, message: str, env_var_name: str | None = None, raw_value: str | None = None):
        super().__init__(message)
        self.env_var_name = env_var_name
        self.raw_value = raw_value
