"""Per-kind health rules.

Each tracked kind maps its status counters or phase to a Health value and
a short description shown beside the node title.  Desired counts are read
from the status block, as reported by the controllers themselves.
"""

from __future__ import annotations

from typing import assert_never

from kubetree.graph.models import Health
from kubetree.models.resources import (
    DaemonSetRecord,
    DeploymentRecord,
    NamespaceRecord,
    PersistentVolumeClaimRecord,
    PersistentVolumeRecord,
    PodRecord,
    ReplicaSetRecord,
    ResourceRecord,
    ServiceRecord,
    StatefulSetRecord,
)

_CLAIM_PHASES: dict[str, tuple[Health, str]] = {
    "Pending": (Health.WARNING, "pending"),
    "Lost": (Health.CRITICAL, "lost"),
}

_VOLUME_PHASES: dict[str, tuple[Health, str]] = {
    "Pending": (Health.WARNING, "pending"),
    "Released": (Health.WARNING, "released"),
    "Failed": (Health.CRITICAL, "failed"),
}


def classify(record: ResourceRecord) -> tuple[Health, str]:
    """Return (health, description) for a resource record."""
    match record:
        case NamespaceRecord():
            return Health.UNSET, ""
        case DeploymentRecord():
            return _classify_deployment(record)
        case ReplicaSetRecord():
            return _classify_replica_set(record)
        case StatefulSetRecord():
            return _classify_stateful_set(record)
        case DaemonSetRecord():
            return _classify_daemon_set(record)
        case PodRecord():
            return _classify_pod(record)
        case PersistentVolumeClaimRecord():
            return _CLAIM_PHASES.get(record.phase, (Health.OK, ""))
        case PersistentVolumeRecord():
            return _VOLUME_PHASES.get(record.phase, (Health.OK, ""))
        case ServiceRecord():
            return _classify_service(record)
        case _:
            assert_never(record)


def _classify_deployment(record: DeploymentRecord) -> tuple[Health, str]:
    avail = record.available_replicas
    updated = record.updated_replicas
    desired = record.replicas
    health = Health.OK

    # Warning is always overwritten by critical in this branch; a short
    # deployment reports critical.
    if avail < desired or updated < desired:
        if avail != 0 and updated != 0:
            health = Health.WARNING
        health = Health.CRITICAL

    return health, f"{avail}/{desired} av, {updated}/{desired} up to date"


def _classify_replica_set(record: ReplicaSetRecord) -> tuple[Health, str]:
    avail = record.available_replicas
    ready = record.ready_replicas
    desired = record.replicas
    health = Health.OK

    # Same precedence as deployments: critical always wins.
    if avail < desired or ready < desired:
        if avail != 0 and ready != 0:
            health = Health.WARNING
        health = Health.CRITICAL

    return health, f"{avail}/{desired} up, {ready}/{desired} rdy"


def _classify_stateful_set(record: StatefulSetRecord) -> tuple[Health, str]:
    current = record.current_replicas
    ready = record.ready_replicas
    desired = record.replicas
    health = Health.OK
    if current < desired or ready < desired:
        health = Health.CRITICAL
    return health, f"{current}/{desired} repl, {ready}/{desired} rdy"


def _classify_daemon_set(record: DaemonSetRecord) -> tuple[Health, str]:
    current = record.current_number_scheduled
    ready = record.number_ready
    missched = record.number_misscheduled
    desired = record.desired_number_scheduled

    health = Health.OK
    if missched > 0 or current < desired or ready < desired:
        health = Health.CRITICAL

    suffix = f" ({missched} misscheduled)" if missched > 0 else ""
    return health, f"{current}/{desired} up, {ready}/{desired} pods up{suffix}"


def _classify_pod(record: PodRecord) -> tuple[Health, str]:
    total = len(record.containers)
    ready = sum(1 for c in record.containers if c.ready)
    running = sum(1 for c in record.containers if c.running)

    health = Health.OK
    detail = f"{running}/{total} up, {ready}/{total} rdy"

    match record.phase:
        case "Running":
            if running != total or ready != total:
                health = Health.CRITICAL
        case "Pending":
            health = Health.WARNING
            detail += " (pending)"
        case "Succeeded":
            health = Health.UNSET
            detail += " (succeeded)"
        case "Failed":
            health = Health.CRITICAL
            detail += " (failed)"

    return health, detail


def _classify_service(record: ServiceRecord) -> tuple[Health, str]:
    if record.service_type != "LoadBalancer":
        return Health.OK, ""

    address = ""
    for ingress in record.ingress:
        if ingress.ip:
            address = ingress.ip
        if ingress.hostname:
            address = ingress.hostname

    if not address:
        return Health.WARNING, "pending"
    return Health.OK, address
