"""Settings loader with layered configuration files."""

import json
import os
from pathlib import Path
from typing import Any

from media_catalog.commons.settings.models import Settings

ENV_PREFIX = "MEDIA_CATALOG__"


class SettingsLoader:
    """Builds Settings from configuration files and environment variables.

    Precedence (highest first):
    1. ``MEDIA_CATALOG__SECTION__KEY`` environment variables
    2. ``appsettings.{environment}.json``
    3. ``appsettings.json``
    """

    def __init__(
        self,
        config_dir: Path | None = None,
        environment: str | None = None,
    ) -> None:
        """Initialize the settings loader.

        Args:
            config_dir: Directory holding the JSON files. Defaults to
                ``config`` under the working directory.
            environment: Environment name (dev, staging, prod). Defaults to
                ``MEDIA_CATALOG__APP__ENVIRONMENT`` or ``dev``.
        """
        self.config_dir = config_dir or Path("config")
        self.environment = environment or os.getenv(
            f"{ENV_PREFIX}APP__ENVIRONMENT", "dev"
        )

    def load(self) -> Settings:
        config = self._read_json("appsettings.json")
        env_file = f"appsettings.{self.environment}.json"
        config = merge_dicts(config, self._read_json(env_file))
        config = merge_dicts(config, self._read_env())
        return Settings(**config)

    def _read_env(self) -> dict[str, Any]:
        """Nest prefixed environment variables by their ``__`` separators.

        ``MEDIA_CATALOG__DOCUMENT_DB__HOST=db`` becomes
        ``{"document_db": {"host": "db"}}``.
        """
        result: dict[str, Any] = {}
        for key, value in os.environ.items():
            if not key.startswith(ENV_PREFIX):
                continue
            *parents, leaf = key[len(ENV_PREFIX) :].lower().split("__")
            current = result
            for part in parents:
                current = current.setdefault(part, {})
            current[leaf] = coerce_env_value(value)
        return result

    def _read_json(self, filename: str) -> dict[str, Any]:
        path = self.config_dir / filename
        if not path.exists():
            return {}
        with path.open(encoding="utf-8") as f:
            return dict(json.load(f))


def coerce_env_value(value: str) -> Any:
    """Turn an environment string into a bool, number, JSON value or str."""
    lowered = value.lower()
    if lowered in ("true", "false"):
        return lowered == "true"

    for cast in (int, float):
        try:
            return cast(value)
        except ValueError:
            pass

    if value.startswith(("[", "{")):
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            pass

    return value


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


class _SettingsHolder:
    instance: Settings | None = None


def get_settings(
    config_dir: Path | None = None,
    environment: str | None = None,
    *,
    reload: bool = False,
) -> Settings:
    """Get or create the process-wide settings.

    Args:
        config_dir: Optional config directory override.
        environment: Optional environment override.
        reload: Force reading the files and environment again.
    """
    if _SettingsHolder.instance is None or reload:
        loader = SettingsLoader(config_dir=config_dir, environment=environment)
        _SettingsHolder.instance = loader.load()
    return _SettingsHolder.instance


def reset_settings() -> None:
    """Forget the cached settings. Useful for testing."""
    _SettingsHolder.instance = None
