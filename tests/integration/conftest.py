"""Shared fixtures for kubetree integration tests.

Provides record factories and a realistic multi-namespace cluster so the
tests can exercise fetch -> build -> render without a real cluster.
"""

from __future__ import annotations

import pytest

from kubetree.collector.source import StaticSource
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
    ResourceRecord,
    ServiceRecord,
    StatefulSetRecord,
)

# ---------------------------------------------------------------------------
# Record factory helpers
# ---------------------------------------------------------------------------


def owned_by(kind: str, name: str) -> tuple[OwnerReference, ...]:
    return (OwnerReference(kind=kind, name=name),)


def make_pod(
    name: str,
    namespace: str = "default",
    owner: tuple[OwnerReference, ...] = (),
    phase: str = "Running",
    ready: int = 1,
    total: int = 1,
    labels: dict[str, str] | None = None,
    claims: tuple[str, ...] = (),
) -> PodRecord:
    """Pod whose first ``ready`` of ``total`` containers are running and ready."""
    running = phase == "Running"
    containers = tuple(
        ContainerStatus(name=f"c{i}", ready=running and i < ready, running=running and i < ready) for i in range(total)
    )
    return PodRecord(
        namespace=namespace,
        name=name,
        owner_references=owner,
        phase=phase,
        labels=labels or {},
        containers=containers,
        claim_names=claims,
    )


def healthy_deployment(name: str, namespace: str = "default", replicas: int = 1) -> DeploymentRecord:
    return DeploymentRecord(
        namespace=namespace,
        name=name,
        replicas=replicas,
        available_replicas=replicas,
        updated_replicas=replicas,
    )


def healthy_replica_set(name: str, deployment: str, namespace: str = "default", replicas: int = 1) -> ReplicaSetRecord:
    return ReplicaSetRecord(
        namespace=namespace,
        name=name,
        owner_references=owned_by("Deployment", deployment),
        replicas=replicas,
        available_replicas=replicas,
        ready_replicas=replicas,
    )


def cluster_records() -> list[ResourceRecord]:
    """A small cluster: a web app, a database with storage, node agents."""
    return [
        NamespaceRecord(name="default"),
        NamespaceRecord(name="db"),
        NamespaceRecord(name="kube-system"),
        # default: web deployment behind a load balancer
        healthy_deployment("web", replicas=2),
        healthy_replica_set("web-7b4f8c6d", "web", replicas=2),
        make_pod("web-7b4f8c6d-x2kj", owner=owned_by("ReplicaSet", "web-7b4f8c6d"), labels={"app": "web"}),
        make_pod("web-7b4f8c6d-q9zt", owner=owned_by("ReplicaSet", "web-7b4f8c6d"), labels={"app": "web"}),
        ServiceRecord(
            namespace="default",
            name="web",
            service_type="LoadBalancer",
            selector={"app": "web"},
            ingress=(LoadBalancerIngress(ip="203.0.113.10"),),
        ),
        # db: stateful set with a bound claim and volume
        StatefulSetRecord(namespace="db", name="pg", replicas=1, current_replicas=1, ready_replicas=1),
        make_pod("pg-0", namespace="db", owner=owned_by("StatefulSet", "pg"), labels={"app": "pg"}, claims=("data-pg-0",)),
        PersistentVolumeClaimRecord(namespace="db", name="data-pg-0", phase="Bound"),
        PersistentVolumeRecord(
            name="pvc-1f2e",
            phase="Bound",
            claim_ref=ClaimReference(kind="PersistentVolumeClaim", namespace="db", name="data-pg-0"),
        ),
        ServiceRecord(namespace="db", name="pg", selector={"app": "pg"}),
        # kube-system: a daemon set with one misscheduled pod
        DaemonSetRecord(
            namespace="kube-system",
            name="kube-proxy",
            desired_number_scheduled=2,
            current_number_scheduled=2,
            number_ready=2,
            number_misscheduled=1,
        ),
        make_pod("kube-proxy-a", namespace="kube-system", owner=owned_by("DaemonSet", "kube-proxy")),
        make_pod("kube-proxy-b", namespace="kube-system", owner=owned_by("DaemonSet", "kube-proxy")),
        # cluster scoped: a released volume nobody claims
        PersistentVolumeRecord(name="pvc-dead", phase="Released"),
    ]


EXPECTED_CLUSTER_TREE = (
    "kubernetes\n"
    "  ns/default\n"
    "    deploy/web -- 2/2 av, 2/2 up to date\n"
    "      svc/web -- 203.0.113.10\n"
    "      rs/web-7b4f8c6d -- 2/2 up, 2/2 rdy\n"
    "        po/web-7b4f8c6d-x2kj -- 1/1 up, 1/1 rdy\n"
    "        po/web-7b4f8c6d-q9zt -- 1/1 up, 1/1 rdy\n"
    "  ns/db\n"
    "    statefulsets/pg -- 1/1 repl, 1/1 rdy\n"
    "      svc/pg\n"
    "      po/pg-0 -- 1/1 up, 1/1 rdy\n"
    "        pvc/data-pg-0\n"
    "          pv/pvc-1f2e\n"
    "  ns/kube-system\n"
    "    ds/kube-proxy -- 2/2 up, 2/2 pods up (1 misscheduled)\n"
    "      po/kube-proxy-a -- 1/1 up, 1/1 rdy\n"
    "      po/kube-proxy-b -- 1/1 up, 1/1 rdy\n"
    "  pv/pvc-dead -- released\n"
)


@pytest.fixture()
def cluster_source() -> StaticSource:
    """StaticSource serving ``cluster_records()``."""
    return StaticSource(cluster_records())
