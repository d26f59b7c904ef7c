"""Central configuration helpers for the Docker generator defaults."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from dockergen.models import HostPlatform

LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "DOCKERGEN"

DEFAULT_PORT = "3000"
DEFAULT_DOCKER_HOST_NAME = "default"
DEFAULT_NODE_BASE_IMAGE = "node"
DEFAULT_GOLANG_BASE_IMAGE = "golang"
DEFAULT_TEMPLATE_DIR = Path(__file__).resolve().parent / "templates"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def get_setting(name: str, default: Optional[str] = None) -> Optional[str]:
    """Fetch configuration values from `DOCKERGEN_<name>` environment variables."""

    value = os.getenv(f"{ENV_PREFIX}_{name}")
    if value is None or not value.strip():
        return default
    return value.strip()


def resolve_env_key(name: str) -> str:
    return f"{ENV_PREFIX}_{name}"


def _parse_bool(name: str, fallback: bool) -> bool:
    raw_value = get_setting(name)
    if raw_value is None:
        return fallback
    normalized = raw_value.lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    LOGGER.warning(
        "Ignoring invalid %s=%r; expected a boolean.",
        resolve_env_key(name),
        raw_value,
        extra={"event": "config.invalid_bool", "payload": {"env_var": resolve_env_key(name)}},
    )
    return fallback


def _parse_platform(raw_value: Optional[str]) -> Optional[HostPlatform]:
    if raw_value is None:
        return None
    try:
        return HostPlatform(raw_value.lower())
    except ValueError:
        LOGGER.warning(
            "Ignoring invalid %s=%r; expected 'posix' or 'windows'.",
            resolve_env_key("PLATFORM"),
            raw_value,
            extra={"event": "config.invalid_platform", "payload": {"value": raw_value}},
        )
        return None


def detect_platform(override: Optional[str] = None) -> HostPlatform:
    """Return the host platform, honoring `DOCKERGEN_PLATFORM` when set."""

    forced = _parse_platform(override if override is not None else get_setting("PLATFORM"))
    if forced is not None:
        return forced
    return HostPlatform.WINDOWS if sys.platform == "win32" else HostPlatform.POSIX


class Settings(BaseModel):
    """Resolved generator settings for a single wizard session."""

    default_port: str = Field(DEFAULT_PORT, description="Port suggested when prompting.")
    docker_host_name: str = Field(DEFAULT_DOCKER_HOST_NAME, description="Suggested docker-machine name.")
    node_base_image: str = Field(DEFAULT_NODE_BASE_IMAGE, description="Base image for Node.js Dockerfiles.")
    golang_base_image: str = Field(DEFAULT_GOLANG_BASE_IMAGE, description="Base image for Go Dockerfiles.")
    template_dir: Path = Field(DEFAULT_TEMPLATE_DIR, description="Directory holding the Jinja2 templates.")
    platform: HostPlatform = Field(HostPlatform.POSIX, description="Shell flavour of the generated script.")
    strict_exit: bool = Field(True, description="Exit non-zero when the session reports errors.")
    log_level: str = Field("WARNING", description="Console log level.")

    model_config = ConfigDict(frozen=True)


def load_settings() -> Settings:
    """Build settings from the environment, falling back to defaults on bad input."""

    template_dir = get_setting("TEMPLATE_DIR")
    resolved_template_dir = DEFAULT_TEMPLATE_DIR
    if template_dir:
        candidate = Path(template_dir).expanduser()
        if candidate.is_dir():
            resolved_template_dir = candidate
        else:
            LOGGER.warning(
                "Ignoring %s=%r; directory does not exist.",
                resolve_env_key("TEMPLATE_DIR"),
                template_dir,
                extra={"event": "config.invalid_template_dir", "payload": {"value": template_dir}},
            )

    return Settings(
        default_port=get_setting("DEFAULT_PORT", DEFAULT_PORT),
        docker_host_name=get_setting("DOCKER_HOST_NAME", DEFAULT_DOCKER_HOST_NAME),
        node_base_image=get_setting("NODE_BASE_IMAGE", DEFAULT_NODE_BASE_IMAGE),
        golang_base_image=get_setting("GOLANG_BASE_IMAGE", DEFAULT_GOLANG_BASE_IMAGE),
        template_dir=resolved_template_dir,
        platform=detect_platform(),
        strict_exit=_parse_bool("STRICT_EXIT", True),
        log_level=get_setting("LOG_LEVEL", "WARNING"),
    )


__all__ = [
    "Settings",
    "detect_platform",
    "get_setting",
    "load_settings",
    "resolve_env_key",
]
