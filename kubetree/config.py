"""Configuration loading from environment variables."""

from __future__ import annotations

import os

from kubetree.models.config import (
    ALL_NAMESPACES,
    ClusterConfig,
    KubetreeConfig,
    LogConfig,
    OutputConfig,
)


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"KUBETREE_{key}", default)


def _env_bool(key: str, default: bool = False) -> bool:
    val = _env(key, str(default).lower())
    return val.lower() in ("true", "1", "yes")


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_log_format(value: str) -> str:
    valid = {"console", "json"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log format: {value}. Must be one of {valid}")
    return value.lower()


def normalize_namespace(value: str | None) -> str:
    """Map the ``all`` keyword and empty values to the all-namespaces scope."""
    if value is None:
        return ALL_NAMESPACES
    value = value.strip()
    if value in ("", "all"):
        return ALL_NAMESPACES
    return value


def load_config() -> KubetreeConfig:
    """Load configuration from KUBETREE_* environment variables."""
    return KubetreeConfig(
        cluster=ClusterConfig(
            kubeconfig=_env("KUBECONFIG", ""),
            namespace=normalize_namespace(_env("NAMESPACE", ALL_NAMESPACES)),
        ),
        output=OutputConfig(
            color=_env_bool("COLOR", False),
        ),
        log=LogConfig(
            level=_validate_log_level(_env("LOG_LEVEL", "warning")),
            format=_validate_log_format(_env("LOG_FORMAT", "console")),
        ),
    )
