"""Decode Kubernetes API objects into typed resource records.

Input is the camelCase dict form produced by
``ApiClient.sanitize_for_serialization`` or ``kubectl get -o json``.  Absent
status counters decode as 0; the API server omits zero-valued fields.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from kubetree.models.resources import (
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
    ServiceRecord,
    StatefulSetRecord,
)


def _section(obj: dict[str, Any], key: str) -> dict[str, Any]:
    value = obj.get(key)
    return value if isinstance(value, dict) else {}


def _int(section: dict[str, Any], key: str) -> int:
    value = section.get(key)
    return int(value) if value is not None else 0


def _str_map(value: Any) -> dict[str, str]:
    if not isinstance(value, dict):
        return {}
    return {str(k): str(v) for k, v in value.items()}


def _owner_references(metadata: dict[str, Any]) -> tuple[OwnerReference, ...]:
    refs = metadata.get("ownerReferences") or []
    return tuple(OwnerReference(kind=str(ref.get("kind", "")), name=str(ref.get("name", ""))) for ref in refs)


def _identity(obj: dict[str, Any]) -> dict[str, Any]:
    metadata = _section(obj, "metadata")
    return {
        "namespace": str(metadata.get("namespace") or ""),
        "name": str(metadata.get("name", "")),
        "owner_references": _owner_references(metadata),
    }


def decode_namespace(obj: dict[str, Any]) -> NamespaceRecord:
    return NamespaceRecord(name=str(_section(obj, "metadata").get("name", "")))


def decode_deployment(obj: dict[str, Any]) -> DeploymentRecord:
    status = _section(obj, "status")
    return DeploymentRecord(
        **_identity(obj),
        replicas=_int(status, "replicas"),
        available_replicas=_int(status, "availableReplicas"),
        updated_replicas=_int(status, "updatedReplicas"),
    )


def decode_replica_set(obj: dict[str, Any]) -> ReplicaSetRecord:
    status = _section(obj, "status")
    return ReplicaSetRecord(
        **_identity(obj),
        replicas=_int(status, "replicas"),
        available_replicas=_int(status, "availableReplicas"),
        ready_replicas=_int(status, "readyReplicas"),
    )


def decode_stateful_set(obj: dict[str, Any]) -> StatefulSetRecord:
    status = _section(obj, "status")
    return StatefulSetRecord(
        **_identity(obj),
        replicas=_int(status, "replicas"),
        current_replicas=_int(status, "currentReplicas"),
        ready_replicas=_int(status, "readyReplicas"),
    )


def decode_daemon_set(obj: dict[str, Any]) -> DaemonSetRecord:
    status = _section(obj, "status")
    return DaemonSetRecord(
        **_identity(obj),
        desired_number_scheduled=_int(status, "desiredNumberScheduled"),
        current_number_scheduled=_int(status, "currentNumberScheduled"),
        number_ready=_int(status, "numberReady"),
        number_misscheduled=_int(status, "numberMisscheduled"),
    )


def decode_pod(obj: dict[str, Any]) -> PodRecord:
    metadata = _section(obj, "metadata")
    spec = _section(obj, "spec")
    status = _section(obj, "status")

    containers = tuple(
        ContainerStatus(
            name=str(cs.get("name", "")),
            ready=bool(cs.get("ready", False)),
            running=_section(cs, "state").get("running") is not None,
        )
        for cs in status.get("containerStatuses") or []
    )
    claim_names = tuple(
        str(volume["persistentVolumeClaim"].get("claimName", ""))
        for volume in spec.get("volumes") or []
        if isinstance(volume.get("persistentVolumeClaim"), dict)
    )
    return PodRecord(
        **_identity(obj),
        phase=str(status.get("phase") or ""),
        labels=_str_map(metadata.get("labels")),
        containers=containers,
        claim_names=claim_names,
    )


def decode_service(obj: dict[str, Any]) -> ServiceRecord:
    spec = _section(obj, "spec")
    load_balancer = _section(_section(obj, "status"), "loadBalancer")
    ingress = tuple(
        LoadBalancerIngress(ip=str(entry.get("ip") or ""), hostname=str(entry.get("hostname") or ""))
        for entry in load_balancer.get("ingress") or []
    )
    return ServiceRecord(
        **_identity(obj),
        service_type=str(spec.get("type") or "ClusterIP"),
        selector=_str_map(spec.get("selector")),
        ingress=ingress,
    )


def decode_claim(obj: dict[str, Any]) -> PersistentVolumeClaimRecord:
    return PersistentVolumeClaimRecord(
        **_identity(obj),
        phase=str(_section(obj, "status").get("phase") or ""),
    )


def decode_volume(obj: dict[str, Any]) -> PersistentVolumeRecord:
    claim_ref = None
    raw_ref = _section(obj, "spec").get("claimRef")
    if isinstance(raw_ref, dict):
        claim_ref = ClaimReference(
            kind=str(raw_ref.get("kind") or ""),
            namespace=str(raw_ref.get("namespace") or ""),
            name=str(raw_ref.get("name") or ""),
        )
    return PersistentVolumeRecord(
        name=str(_section(obj, "metadata").get("name", "")),
        phase=str(_section(obj, "status").get("phase") or ""),
        claim_ref=claim_ref,
    )


DECODERS: dict[ResourceKind, Callable[[dict[str, Any]], ResourceRecord]] = {
    ResourceKind.NAMESPACE: decode_namespace,
    ResourceKind.DEPLOYMENT: decode_deployment,
    ResourceKind.REPLICA_SET: decode_replica_set,
    ResourceKind.STATEFUL_SET: decode_stateful_set,
    ResourceKind.DAEMON_SET: decode_daemon_set,
    ResourceKind.POD: decode_pod,
    ResourceKind.SERVICE: decode_service,
    ResourceKind.PERSISTENT_VOLUME_CLAIM: decode_claim,
    ResourceKind.PERSISTENT_VOLUME: decode_volume,
}


def record_from_dict(kind: ResourceKind | str, obj: dict[str, Any]) -> ResourceRecord:
    """Decode ``obj`` as a record of ``kind``.

    Raises ValueError for kinds that are not tracked.
    """
    try:
        decoder = DECODERS[ResourceKind(kind)]
    except ValueError as exc:
        raise ValueError(f"Untracked resource kind: {kind}") from exc
    return decoder(obj)
