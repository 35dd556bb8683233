"""
config.py - Fleetwatch configuration

Environment-driven settings for the component repository client and the
component session.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from urllib.parse import quote
import os
import logging

logger = logging.getLogger("config")


DEFAULT_API_BASE_URL = "https://dev-api.nautiproconnect.com/api/v1/web"
DEFAULT_COMPONENTS_PATH = "/components-by-vessel/{vessel_id}"


# =============================================================================
# API CONFIGURATION
# =============================================================================

@dataclass
class ApiConfig:
    """Remote component API settings."""

    base_url: str = DEFAULT_API_BASE_URL
    components_path: str = DEFAULT_COMPONENTS_PATH
    api_key: str = ""
    token: str = ""
    timeout_seconds: float = 30.0

    def __post_init__(self):
        """Validate configuration."""
        assert self.timeout_seconds > 0, "timeout_seconds must be positive"
        assert "{vessel_id}" in self.components_path, "components_path must contain {vessel_id}"
        self.base_url = self.base_url.rstrip("/")

    def components_url(self, vessel_id: str) -> str:
        return self.components_path.format(vessel_id=quote(str(vessel_id), safe=""))

    @classmethod
    def from_env(cls) -> "ApiConfig":
        """Create API configuration from environment variables."""
        return cls(
            base_url=os.getenv("FLEETWATCH_API_BASE_URL", DEFAULT_API_BASE_URL),
            components_path=os.getenv("FLEETWATCH_COMPONENTS_PATH", DEFAULT_COMPONENTS_PATH),
            api_key=os.getenv("FLEETWATCH_API_KEY", ""),
            token=os.getenv("FLEETWATCH_API_TOKEN", ""),
            timeout_seconds=float(os.getenv("FLEETWATCH_API_TIMEOUT", "30")),
        )


# =============================================================================
# TOP-LEVEL CONFIGURATION
# =============================================================================

@dataclass
class FleetwatchConfig:
    """Complete fleetwatch configuration."""

    api: ApiConfig = field(default_factory=ApiConfig)
    log_level: str = "INFO"
    emit_events: bool = True

    @classmethod
    def from_env(cls) -> "FleetwatchConfig":
        """Create configuration from environment variables."""
        return cls(
            api=ApiConfig.from_env(),
            log_level=os.getenv("FLEETWATCH_LOG_LEVEL", "INFO").upper(),
            emit_events=os.getenv("FLEETWATCH_EMIT_EVENTS", "true").lower() == "true",
        )


# =============================================================================
# DEFAULT CONFIGURATION
# =============================================================================

_DEFAULT_CONFIG: FleetwatchConfig = None


def get_config() -> FleetwatchConfig:
    """Get the default configuration, read from the environment on first use."""
    global _DEFAULT_CONFIG
    if _DEFAULT_CONFIG is None:
        _DEFAULT_CONFIG = FleetwatchConfig.from_env()
    return _DEFAULT_CONFIG


def set_config(config: FleetwatchConfig) -> None:
    """Set the default configuration."""
    global _DEFAULT_CONFIG
    _DEFAULT_CONFIG = config
