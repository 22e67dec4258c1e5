"""Client configuration and credential loading."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Optional

import yaml
from decouple import config

from pexels_api import __version__
from pexels_api.errors import ConfigurationError
from pexels_api.request_builder import DEFAULT_PER_PAGE, MAX_PER_PAGE

DEFAULT_BASE_URL = "https://api.pexels.com"
DEFAULT_USER_AGENT = f"pexels-client/{__version__}"
API_KEY_ENV = "PEXELS_API_KEY"


@dataclass(frozen=True)
class Credentials:
    """API key used to authenticate every request."""

    api_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigurationError(f"{API_KEY_ENV} is not configured.")


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration shared by every call made through a client."""

    credentials: Credentials
    base_url: str = DEFAULT_BASE_URL
    timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT

    def __post_init__(self) -> None:
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"Invalid base URL: {self.base_url!r}")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError(f"Timeout must be positive, got {self.timeout!r}")


def credentials_from_env(name: str = API_KEY_ENV) -> Credentials:
    """Read the API key from the environment or a .env file."""
    api_key = config(name, default="")
    if not api_key:
        raise ConfigurationError(f"{name} is not configured.")
    return Credentials(api_key=api_key)


def load_settings(settings_path: Path) -> Dict[str, Any]:
    """Load YAML settings file. A missing file yields empty settings."""
    if not settings_path.exists():
        logging.info("[CONFIG] Settings file not found: %s. Using defaults.", settings_path)
        return {}
    try:
        with settings_path.open("r", encoding="utf-8") as file:
            settings = yaml.safe_load(file)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Invalid settings file {settings_path}: {exc}") from exc
    if settings is None:
        return {}
    if not isinstance(settings, dict):
        raise ConfigurationError(f"Settings file {settings_path} must contain a mapping.")
    return settings


def settings_section(settings: Dict[str, Any], name: str) -> Dict[str, Any]:
    """Return one section of the settings. An absent or empty section is `{}`."""
    section = settings.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigurationError(f"Settings section '{name}' must be a mapping, got {section!r}")
    return section


def _setting_number(section: Dict[str, Any], key: str, cast: Callable[[Any], Any]) -> Any:
    value = section.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        raise ConfigurationError(f"Setting pexels.{key} must be a number, got {value!r}")
    try:
        return cast(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"Setting pexels.{key} must be a number, got {value!r}") from exc


def default_per_page(settings: Dict[str, Any]) -> int:
    """Page size used by the CLI when none is given on the command line."""
    per_page = _setting_number(settings_section(settings, "pexels"), "default_per_page", int)
    if per_page is None:
        return DEFAULT_PER_PAGE
    if not 1 <= per_page <= MAX_PER_PAGE:
        raise ConfigurationError(f"Setting pexels.default_per_page must be between 1 and {MAX_PER_PAGE}")
    return per_page


def build_client_config(settings: Dict[str, Any], credentials: Credentials) -> ClientConfig:
    """Build a ClientConfig from the `pexels` section of a settings dictionary."""
    pexels_settings = settings_section(settings, "pexels")
    return ClientConfig(
        credentials=credentials,
        base_url=str(pexels_settings.get("base_url") or DEFAULT_BASE_URL),
        timeout=_setting_number(pexels_settings, "timeout_seconds", float),
    )
