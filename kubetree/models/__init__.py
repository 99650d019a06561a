"""Core data structures for kubetree."""

from kubetree.models.config import ALL_NAMESPACES, KubetreeConfig
from kubetree.models.resources import (
    CONTROLLER_KINDS,
    ClaimReference,
    ContainerStatus,
    DaemonSetRecord,
    DeploymentRecord,
    LoadBalancerIngress,
    NamespaceRecord,
    OwnerReference,
    PersistentVolumeClaimRecord,
    PersistentVolumeRecord,
    PodRecord,
    ReplicaSetRecord,
    ResourceKind,
    ResourceRecord,
    ResourceSnapshot,
    ServiceRecord,
    StatefulSetRecord,
)

__all__ = [
    "ALL_NAMESPACES",
    "CONTROLLER_KINDS",
    "ClaimReference",
    "ContainerStatus",
    "DaemonSetRecord",
    "DeploymentRecord",
    "KubetreeConfig",
    "LoadBalancerIngress",
    "NamespaceRecord",
    "OwnerReference",
    "PersistentVolumeClaimRecord",
    "PersistentVolumeRecord",
    "PodRecord",
    "ReplicaSetRecord",
    "ResourceKind",
    "ResourceRecord",
    "ResourceSnapshot",
    "ServiceRecord",
    "StatefulSetRecord",
]
