"""Typed resource records, one variant per tracked Kubernetes kind.

Each record carries identity (namespace, name, owner references) plus
exactly the status fields the health classifier reads.  Records are
immutable once decoded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum


class ResourceKind(StrEnum):
    """Kinds the tree builder tracks."""

    NAMESPACE = "Namespace"
    DEPLOYMENT = "Deployment"
    REPLICA_SET = "ReplicaSet"
    STATEFUL_SET = "StatefulSet"
    DAEMON_SET = "DaemonSet"
    POD = "Pod"
    SERVICE = "Service"
    PERSISTENT_VOLUME = "PersistentVolume"
    PERSISTENT_VOLUME_CLAIM = "PersistentVolumeClaim"


CONTROLLER_KINDS = frozenset(
    {
        ResourceKind.REPLICA_SET,
        ResourceKind.STATEFUL_SET,
        ResourceKind.DAEMON_SET,
        ResourceKind.DEPLOYMENT,
    }
)


@dataclass(frozen=True)
class OwnerReference:
    """Pointer from a dependent to the controller managing it."""

    kind: str
    name: str


@dataclass(frozen=True)
class ContainerStatus:
    name: str
    ready: bool = False
    running: bool = False


@dataclass(frozen=True)
class LoadBalancerIngress:
    ip: str = ""
    hostname: str = ""


@dataclass(frozen=True)
class ClaimReference:
    """spec.claimRef of a PersistentVolume."""

    kind: str
    namespace: str
    name: str


@dataclass(frozen=True)
class NamespaceRecord:
    name: str
    namespace: str = ""
    owner_references: tuple[OwnerReference, ...] = ()

    kind = ResourceKind.NAMESPACE


@dataclass(frozen=True)
class DeploymentRecord:
    namespace: str
    name: str
    owner_references: tuple[OwnerReference, ...] = ()
    replicas: int = 0
    available_replicas: int = 0
    updated_replicas: int = 0

    kind = ResourceKind.DEPLOYMENT


@dataclass(frozen=True)
class ReplicaSetRecord:
    namespace: str
    name: str
    owner_references: tuple[OwnerReference, ...] = ()
    replicas: int = 0
    available_replicas: int = 0
    ready_replicas: int = 0

    kind = ResourceKind.REPLICA_SET


@dataclass(frozen=True)
class StatefulSetRecord:
    namespace: str
    name: str
    owner_references: tuple[OwnerReference, ...] = ()
    replicas: int = 0
    current_replicas: int = 0
    ready_replicas: int = 0

    kind = ResourceKind.STATEFUL_SET


@dataclass(frozen=True)
class DaemonSetRecord:
    namespace: str
    name: str
    owner_references: tuple[OwnerReference, ...] = ()
    desired_number_scheduled: int = 0
    current_number_scheduled: int = 0
    number_ready: int = 0
    number_misscheduled: int = 0

    kind = ResourceKind.DAEMON_SET


@dataclass(frozen=True)
class PodRecord:
    namespace: str
    name: str
    owner_references: tuple[OwnerReference, ...] = ()
    phase: str = ""
    labels: dict[str, str] = field(default_factory=dict)
    containers: tuple[ContainerStatus, ...] = ()
    claim_names: tuple[str, ...] = ()  # spec.volumes[].persistentVolumeClaim.claimName

    kind = ResourceKind.POD


@dataclass(frozen=True)
class ServiceRecord:
    namespace: str
    name: str
    owner_references: tuple[OwnerReference, ...] = ()
    service_type: str = "ClusterIP"
    selector: dict[str, str] = field(default_factory=dict)
    ingress: tuple[LoadBalancerIngress, ...] = ()

    kind = ResourceKind.SERVICE


@dataclass(frozen=True)
class PersistentVolumeClaimRecord:
    namespace: str
    name: str
    owner_references: tuple[OwnerReference, ...] = ()
    phase: str = ""

    kind = ResourceKind.PERSISTENT_VOLUME_CLAIM


@dataclass(frozen=True)
class PersistentVolumeRecord:
    name: str
    namespace: str = ""
    owner_references: tuple[OwnerReference, ...] = ()
    phase: str = ""
    claim_ref: ClaimReference | None = None

    kind = ResourceKind.PERSISTENT_VOLUME


ResourceRecord = (
    NamespaceRecord
    | DeploymentRecord
    | ReplicaSetRecord
    | StatefulSetRecord
    | DaemonSetRecord
    | PodRecord
    | ServiceRecord
    | PersistentVolumeClaimRecord
    | PersistentVolumeRecord
)


@dataclass
class ResourceSnapshot:
    """Every collection needed for one build, fetched to completion."""

    namespaces: list[NamespaceRecord] = field(default_factory=list)
    deployments: list[DeploymentRecord] = field(default_factory=list)
    replica_sets: list[ReplicaSetRecord] = field(default_factory=list)
    stateful_sets: list[StatefulSetRecord] = field(default_factory=list)
    daemon_sets: list[DaemonSetRecord] = field(default_factory=list)
    claims: list[PersistentVolumeClaimRecord] = field(default_factory=list)
    volumes: list[PersistentVolumeRecord] = field(default_factory=list)
    services: list[ServiceRecord] = field(default_factory=list)
    pods: list[PodRecord] = field(default_factory=list)
