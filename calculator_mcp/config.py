"""
Server configuration

Values come from environment variables, optionally loaded from a .env file.
"""

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"
    nws_api_base: str = "https://api.weather.gov"
    nws_user_agent: str = "weather-app/1.0"
    nws_timeout: float = 30.0
    json_response: bool = False
    stateless: bool = False


def load_settings() -> Settings:
    """Read settings from the environment."""
    return Settings(
        host=os.getenv("MCP_HOST", "0.0.0.0"),
        port=int(os.getenv("MCP_PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        nws_api_base=os.getenv("NWS_API_BASE", "https://api.weather.gov").rstrip("/"),
        nws_user_agent=os.getenv("NWS_USER_AGENT", "weather-app/1.0"),
        nws_timeout=float(os.getenv("NWS_TIMEOUT", "30")),
        json_response=_env_bool("MCP_JSON_RESPONSE"),
        stateless=_env_bool("MCP_STATELESS"),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
