"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

ALL_NAMESPACES = ""


@dataclass
class ClusterConfig:
    """Cluster connection and scope configuration."""

    kubeconfig: str = ""  # empty: in-cluster config, then the kubeconfig default
    namespace: str = ALL_NAMESPACES


@dataclass
class OutputConfig:
    """Tree output configuration."""

    color: bool = False


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"
    format: str = "console"  # console | json


@dataclass
class KubetreeConfig:
    """Top-level kubetree configuration."""

    cluster: ClusterConfig = field(default_factory=ClusterConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log: LogConfig = field(default_factory=LogConfig)
