"""Multi-source resolution of client settings.

Resolution order (highest to lowest priority):
1. Explicitly provided value
2. Environment variable
3. .env file (python-dotenv, loaded into the environment once)
4. Default value

Example:
    ```python
    from api_version_client.config import SettingResolver

    resolver = SettingResolver()

    version = resolver.resolve(env_var_name="API_VERSION", default="1.0")
    segment = resolver.resolve_int(env_var_name="API_VERSION_PATH_SEGMENT")
    ```
"""

import logging
import os
from threading import Lock

from dotenv import load_dotenv

from api_version_client.config.exceptions import SettingNotFoundError, SettingValueError

logger = logging.getLogger(__name__)


class SettingResolver:
    """Resolve settings from explicit values, the environment, .env files and defaults.

    Attributes:
        _dotenv_loaded: Whether the .env file has been loaded.
        _dotenv_lock: Thread lock for safe dotenv loading.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """Initialize setting resolver.

        Args:
            dotenv_path: Path to .env file. If None, python-dotenv searches
                parent directories for one.
            load_dotenv: Whether to load the .env file at all. Disable in tests
                or when configuration comes only from the environment.
        """
        self._dotenv_loaded = False
        self._dotenv_lock = Lock()
        self._dotenv_path = dotenv_path
        self._load_dotenv_enabled = load_dotenv

        if self._load_dotenv_enabled:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        if self._dotenv_loaded:
            return

        with self._dotenv_lock:
            if self._dotenv_loaded:
                return

            try:
                load_dotenv(dotenv_path=self._dotenv_path)
                logger.debug("Loaded .env file for setting resolution")
            except OSError as e:
                logger.warning(f"Failed to load .env file: {e}")
            # Mark as attempted either way
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Resolve a setting from multiple sources.

        Args:
            value: Explicitly provided value (highest priority).
            env_var_name: Environment variable name to check. Values from the
                .env file are visible here once loaded.
            default: Default value if not found elsewhere.
            required: If True, raise SettingNotFoundError when nothing resolves.

        Returns:
            Resolved value, or None if not found and not required.

        Raises:
            SettingNotFoundError: If required=True and no source has a value.
        """
        result = None
        source = None

        if value is not None:
            result = value
            source = "explicit parameter"
        elif env_var_name and os.environ.get(env_var_name):
            result = os.environ[env_var_name]
            source = f"environment variable '{env_var_name}'"
        elif default is not None:
            result = default
            source = "default value"

        if result is not None:
            logger.debug(f"Resolved setting from {source}: {result}")

        if required and result is None:
            error_msg = "Required setting not found"
            if env_var_name:
                error_msg += f" (checked env var: {env_var_name})"
            raise SettingNotFoundError(error_msg, env_var_name=env_var_name)

        return result

    def resolve_int(
        self,
        *,
        value: int | str | None = None,
        env_var_name: str | None = None,
        default: int | None = None,
        required: bool = False,
    ) -> int | None:
        """Resolve a setting and parse it as an integer.

        Raises:
            SettingNotFoundError: If required=True and no source has a value.
            SettingValueError: If the resolved value is not an integer.
        """
        raw = self.resolve(
            value=None if value is None else str(value),
            env_var_name=env_var_name,
            default=None if default is None else str(default),
            required=required,
        )
        if raw is None:
            return None

        try:
            return int(raw.strip())
        except ValueError:
            where = f" from env var '{env_var_name}'" if env_var_name else ""
            raise SettingValueError(
                f"Expected an integer setting{where}, got {raw!r}", env_var_name=env_var_name, raw_value=raw
            ) from None
