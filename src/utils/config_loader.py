"""Configuration loader for YAML files."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger("country_service")

PROJECT_ROOT = Path(__file__).parent.parent.parent
DEFAULT_CONFIG_PATH = "config/service.yaml"
CONFIG_ENV_VAR = "COUNTRY_SERVICE_CONFIG"


@dataclass(frozen=True)
class ServiceSettings:
    """Runtime settings for the classifier and its HTTP surface.

    Marker tokens are opaque strings: downstream routers match them
    literally, so they are kept configurable rather than hard-coded.
    """

    default_key: str = "garbage"
    whitelist_default_key: str = "not_@llowed"
    blocked_marker: str = "not_@llowed"
    allowed_marker: str = "@llowed"
    channel_prefixes: List[str] = field(default_factory=lambda: ["whatsapp:"])
    host: str = "0.0.0.0"
    port: int = 31000
    log_level: str = "INFO"
    log_file: Optional[Path] = None
    allow_origins: List[str] = field(default_factory=lambda: ["*"])


def load_yaml(filepath: Path) -> Dict[str, Any]:
    """Load YAML file and return as dictionary.

    Args:
        filepath: Path to YAML file.

    Returns:
        Dictionary with YAML contents.

    Raises:
        FileNotFoundError: If file doesn't exist.
        yaml.YAMLError: If YAML is malformed.
    """
    if not filepath.exists():
        raise FileNotFoundError(f"Config file not found: {filepath}")

    try:
        with open(filepath, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML file {filepath}: {e}")
        raise

    if config is None:
        logger.warning(f"YAML file is empty: {filepath}")
        return {}

    return config


def load_yaml_config(filepath: Union[str, Path]) -> Dict[str, Any]:
    """Load YAML file from string path or Path object.

    Relative paths are resolved against the project root.

    Args:
        filepath: Path to YAML file (string or Path).

    Returns:
        Dictionary with YAML contents.

    Raises:
        FileNotFoundError: If file doesn't exist.
        yaml.YAMLError: If YAML is malformed.
    """
    path = Path(filepath) if isinstance(filepath, str) else filepath
    if not path.is_absolute():
        path = PROJECT_ROOT / path
    return load_yaml(path)


def settings_from_dict(config: Dict[str, Any]) -> ServiceSettings:
    """Build ServiceSettings from a parsed config mapping, keeping defaults for missing keys."""
    defaults = ServiceSettings()
    resolver = config.get("resolver", {}) or {}
    markers = resolver.get("markers", {}) or {}
    server = config.get("server", {}) or {}
    logging_config = config.get("logging", {}) or {}
    cors = config.get("cors", {}) or {}

    log_file = logging_config.get("file")
    # An explicit empty list disables prefix stripping
    prefixes = resolver.get("channel_prefixes")
    origins = cors.get("allow_origins")

    return ServiceSettings(
        default_key=str(resolver.get("default_key") or defaults.default_key),
        whitelist_default_key=str(
            resolver.get("whitelist_default_key") or defaults.whitelist_default_key
        ),
        blocked_marker=str(markers.get("blocked") or defaults.blocked_marker),
        allowed_marker=str(markers.get("allowed") or defaults.allowed_marker),
        channel_prefixes=list(prefixes) if prefixes is not None else defaults.channel_prefixes,
        host=str(server.get("host") or defaults.host),
        port=int(server.get("port") or defaults.port),
        log_level=str(logging_config.get("level") or defaults.log_level),
        log_file=Path(log_file) if log_file else None,
        allow_origins=list(origins) if origins is not None else defaults.allow_origins,
    )


def load_service_settings(config_path: Optional[Union[str, Path]] = None) -> ServiceSettings:
    """Load service settings from config/service.yaml.

    The path can be overridden with the COUNTRY_SERVICE_CONFIG environment
    variable. A missing file falls back to built-in defaults.

    Args:
        config_path: Optional explicit path to the YAML file.

    Returns:
        ServiceSettings instance.
    """
    path = config_path or os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    try:
        config = load_yaml_config(path)
    except FileNotFoundError:
        logger.warning(f"Config file not found at {path}, using defaults")
        return ServiceSettings()

    logger.info(f"Loaded service settings from {path}")
    return settings_from_dict(config)
