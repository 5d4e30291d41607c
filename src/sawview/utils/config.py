# src/sawview/utils/config.py
import copy
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import yaml

from ..exceptions import ConfigError

class Config:
    # Node configuration
    DEFAULT_NODE_URL = "http://localhost:8008"
    REQUEST_TIMEOUT = 10  # seconds
    BLOCKS_ENDPOINT = "blocks"
    STATE_ENDPOINT = "state"

    # Payload configuration
    DEFAULT_SCHEME = "cbor"
    TRANSACTION_PAYLOAD_INDENT = 3
    STATE_PAYLOAD_INDENT = 2

    # Identifier shortening
    PARTIAL_PREFIX_LENGTH = 6
    PARTIAL_SUFFIX_LENGTH = 4

    # Ledger layout
    ADDRESS_LENGTH = 70
    NAMESPACE_LENGTH = 6
    GENESIS_BLOCK_NUM = "0"
    FIRST_BLOCK_NUM = "1"
    SETTINGS_NAMESPACE = "000000"

    # Settings file
    CONFIG_PATH = os.path.join("~", ".sawview.yaml")
    LOG_LEVEL = "WARNING"

DEFAULT_SETTINGS: Dict[str, Any] = {
    "node": {
        "url": Config.DEFAULT_NODE_URL,
        "timeout": Config.REQUEST_TIMEOUT,
    },
    "display": {
        "full_ids": False,
        "show_genesis": False,
        "scheme": Config.DEFAULT_SCHEME,
        "color": None,  # None means "colour when stdout is a terminal"
    },
    "logging": {
        "level": Config.LOG_LEVEL,
    },
}

@dataclass(frozen=True)
class RenderConfig:
    """Per-run report settings"""
    full_identifiers: bool = False
    include_genesis_or_settings: bool = False
    payload_scheme: str = Config.DEFAULT_SCHEME

def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged

class ViewerConfig:
    def __init__(self, config_path: Optional[str] = None):
        self.config_path = os.path.expanduser(config_path or Config.CONFIG_PATH)
        self.config = self._load_config()

    def _load_config(self) -> Dict[str, Any]:
        if not os.path.exists(self.config_path):
            return copy.deepcopy(DEFAULT_SETTINGS)

        try:
            with open(self.config_path, 'r') as f:
                loaded = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error reading settings file {self.config_path}: {e}")

        if loaded is None:
            loaded = {}
        if not isinstance(loaded, dict):
            raise ConfigError(
                f"Settings file {self.config_path} must contain a mapping"
            )
        return _merge(DEFAULT_SETTINGS, loaded)

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        try:
            keys = key.split('.')
            value = self.config
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def update(self, key: str, value: Any):
        """Update configuration value for this run."""
        keys = key.split('.')
        config = self.config
        for k in keys[:-1]:
            config = config.setdefault(k, {})
        config[keys[-1]] = value

    def timeout(self) -> float:
        """Request timeout in seconds, the default when unset"""
        value = self.get("node.timeout")
        if value is None:
            return float(Config.REQUEST_TIMEOUT)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
            raise ConfigError(f"node.timeout must be a positive number, got {value!r}")
        return float(value)

    def render_config(self) -> RenderConfig:
        """Build the report settings from the display section"""
        return RenderConfig(
            full_identifiers=bool(self.get("display.full_ids", False)),
            include_genesis_or_settings=bool(self.get("display.show_genesis", False)),
            payload_scheme=str(self.get("display.scheme", Config.DEFAULT_SCHEME)),
        )
