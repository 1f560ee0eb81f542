"""Reporter configuration.

Values come from ``config.json`` in the app's data directory, then
environment variables override them.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

logger = logging.getLogger(__name__)

DEFAULT_LOCATION_PATH = "/api/v1/location"
DEFAULT_TIMEOUT = 30

Credentials = Tuple[str, str]
CredentialProvider = Callable[[], Optional[Credentials]]


def static_credentials(username: Optional[str], password: Optional[str]) -> CredentialProvider:
    """Credential provider returning a fixed username/password pair."""

    def provider() -> Optional[Credentials]:
        if not username or password is None:
            return None
        return username, password

    return provider


@dataclass
class ReporterConfig:
    server_base_url: str = ""
    location_path: str = DEFAULT_LOCATION_PATH
    credentials: CredentialProvider = field(default_factory=lambda: static_credentials(None, None))
    timeout: float = DEFAULT_TIMEOUT
    # The existing receiver expects longitude under "latitude" and vice versa
    swap_axes: bool = True

    @property
    def endpoint_url(self) -> str:
        base = (self.server_base_url or "").strip().rstrip("/")
        if not base:
            return ""
        return f"{base}/{self.location_path.lstrip('/')}"

    @property
    def is_configured(self) -> bool:
        return bool(self.endpoint_url) and self.credentials() is not None


def load_config_file(path: str) -> Dict[str, Any]:
    if not os.path.exists(path):
        return {}
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning("Ignoring unreadable config %s: %s", path, e)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: expected a JSON object, got %s", path, type(data).__name__)
        return {}
    return data


def _as_bool(value: Any, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        text = value.strip().lower()
        if text in ("1", "true", "yes", "on"):
            return True
        if text in ("0", "false", "no", "off"):
            return False
        logger.warning("Invalid boolean %r, using %s", value, default)
        return default
    return bool(value)


def _env_overrides(cfg: Dict[str, Any]) -> Dict[str, Any]:
    cfg = dict(cfg)
    if os.environ.get("FISHFINDR_SERVER_URL"):
        cfg["server_base_url"] = os.environ["FISHFINDR_SERVER_URL"]
    if os.environ.get("FISHFINDR_USERNAME"):
        cfg["username"] = os.environ["FISHFINDR_USERNAME"]
    if os.environ.get("FISHFINDR_PASSWORD"):
        cfg["password"] = os.environ["FISHFINDR_PASSWORD"]
    if os.environ.get("FISHFINDR_TIMEOUT"):
        cfg["timeout"] = os.environ["FISHFINDR_TIMEOUT"]
    if os.environ.get("FISHFINDR_SWAP_AXES"):
        cfg["swap_axes"] = os.environ["FISHFINDR_SWAP_AXES"]
    return cfg


def load_config(data_dir: Optional[str] = None) -> ReporterConfig:
    """Build a ReporterConfig from ``<data_dir>/config.json`` and the environment."""
    cfg: Dict[str, Any] = {}
    if data_dir:
        cfg = load_config_file(os.path.join(data_dir, "config.json"))
    cfg = _env_overrides(cfg)

    try:
        timeout = float(cfg.get("timeout") or DEFAULT_TIMEOUT)
    except (TypeError, ValueError):
        logger.warning("Invalid timeout %r, using %ss", cfg.get("timeout"), DEFAULT_TIMEOUT)
        timeout = DEFAULT_TIMEOUT

    return ReporterConfig(
        server_base_url=(cfg.get("server_base_url") or "").rstrip("/"),
        location_path=cfg.get("location_path") or DEFAULT_LOCATION_PATH,
        credentials=static_credentials(cfg.get("username"), cfg.get("password")),
        timeout=timeout,
        swap_axes=_as_bool(cfg.get("swap_axes"), True),
    )
