"""Runtime configuration read from environment variables."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from sunshine.locate.factory import resolve_native_mode
from sunshine.locate.network import DEFAULT_GEOCODER_URL, DEFAULT_IP_API_URL
from sunshine.version import __version__

DEFAULT_USER_AGENT = f"sunshine/{__version__} (https://github.com/crescentrose/sunshine)"


@dataclass(frozen=True)
class SunshineConfig:
    """Endpoints, native locator mode, cache location and log level."""

    geocoder_url: str = DEFAULT_GEOCODER_URL
    ip_api_url: str = DEFAULT_IP_API_URL
    user_agent: str = DEFAULT_USER_AGENT
    native_mode: str = "auto"
    cache_dir: Path | None = None
    log_level: str = "WARNING"


def config_from_env(environ: Mapping[str, str] | None = None) -> SunshineConfig:
    """
    Build SunshineConfig from environment variables.

    Optional:
      - SUNSHINE_GEOCODER_URL
      - SUNSHINE_IP_API_URL
      - SUNSHINE_USER_AGENT
      - SUNSHINE_NATIVE_LOCATOR (auto, corelocation, none)
      - SUNSHINE_CACHE_DIR
      - SUNSHINE_LOG_LEVEL
    """
    env = os.environ if environ is None else environ
    cache_dir = env.get("SUNSHINE_CACHE_DIR")
    log_level = env.get("SUNSHINE_LOG_LEVEL", "WARNING").strip().upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"unknown log level: {log_level}")

    return SunshineConfig(
        geocoder_url=env.get("SUNSHINE_GEOCODER_URL", DEFAULT_GEOCODER_URL),
        ip_api_url=env.get("SUNSHINE_IP_API_URL", DEFAULT_IP_API_URL),
        user_agent=env.get("SUNSHINE_USER_AGENT", DEFAULT_USER_AGENT),
        native_mode=resolve_native_mode(env.get("SUNSHINE_NATIVE_LOCATOR", "auto")),
        cache_dir=Path(cache_dir).expanduser() if cache_dir else None,
        log_level=log_level,
    )
