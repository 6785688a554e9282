"""
Static configuration.

Values come from the environment (optionally a .env file) and are read once
at startup. The result is frozen and passed explicitly to the front ends;
command-line flags derive a new value with dataclasses.replace().
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from swimtimes.client import API_URL
from swimtimes.errors import ConfigError


DEFAULT_CENTER = "Huntingdon"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080
DEFAULT_TEMPLATE_DIR = "./templates"
DEFAULT_ASSETS_DIR = "./public"


@dataclass(frozen=True)
class AppConfig:
    """Configuration shared by the CLI and the web server"""

    center: str = DEFAULT_CENTER
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    template_dir: Path = Path(DEFAULT_TEMPLATE_DIR)
    assets_dir: Path = Path(DEFAULT_ASSETS_DIR)
    api_url: str = API_URL
    log_level: str = "INFO"


def _parse_port(raw: str) -> int:
    try:
        port = int(raw)
    except ValueError:
        raise ConfigError(f"SWIMTIMES_PORT must be an integer, got {raw!r}") from None
    if not 0 < port < 65536:
        raise ConfigError(f"SWIMTIMES_PORT out of range: {port}")
    return port


def load_config(*, dotenv: bool = True) -> AppConfig:
    """Load configuration from environment variables"""
    if dotenv:
        load_dotenv()

    return AppConfig(
        center=os.getenv("SWIMTIMES_CENTER") or DEFAULT_CENTER,
        host=os.getenv("SWIMTIMES_HOST") or DEFAULT_HOST,
        port=_parse_port(os.getenv("SWIMTIMES_PORT") or str(DEFAULT_PORT)),
        template_dir=Path(os.getenv("SWIMTIMES_TEMPLATE_DIR") or DEFAULT_TEMPLATE_DIR),
        assets_dir=Path(os.getenv("SWIMTIMES_ASSETS_DIR") or DEFAULT_ASSETS_DIR),
        api_url=os.getenv("SWIMTIMES_API_URL") or API_URL,
        log_level=(os.getenv("SWIMTIMES_LOG_LEVEL") or "INFO").upper(),
    )
