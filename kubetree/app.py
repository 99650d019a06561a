"""Application flow for kubetree.

fetch -> build -> render, in that order and with no overlap:

1. every collection is fetched to completion; the first failure raises
   ResourceFetchError and nothing is built,
2. the tree is assembled in one synchronous pass,
3. the tree is rendered once to a single text blob.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kubetree.collector.source import KubernetesSource, ResourceFetchError, ResourceSource, connect
from kubetree.graph.builder import build_tree
from kubetree.graph.render import Palette, render_tree
from kubetree.models.resources import ResourceKind, ResourceSnapshot
from kubetree.observability.logging import get_logger

if TYPE_CHECKING:
    from kubetree.models.config import KubetreeConfig

# Fetch order matches ingestion order.
_FETCH_PLAN: tuple[tuple[ResourceKind, str], ...] = (
    (ResourceKind.NAMESPACE, "namespaces"),
    (ResourceKind.DEPLOYMENT, "deployments"),
    (ResourceKind.REPLICA_SET, "replica_sets"),
    (ResourceKind.STATEFUL_SET, "stateful_sets"),
    (ResourceKind.DAEMON_SET, "daemon_sets"),
    (ResourceKind.PERSISTENT_VOLUME_CLAIM, "claims"),
    (ResourceKind.PERSISTENT_VOLUME, "volumes"),
    (ResourceKind.SERVICE, "services"),
    (ResourceKind.POD, "pods"),
)


async def fetch_snapshot(source: ResourceSource, namespace: str) -> ResourceSnapshot:
    """Fetch every tracked collection within ``namespace``.

    Raises ResourceFetchError on the first failing collection.
    """
    log = get_logger("app")
    snapshot = ResourceSnapshot()
    for kind, attr in _FETCH_PLAN:
        try:
            records = await source.list_records(kind, namespace)
        except ResourceFetchError:
            raise
        except Exception as exc:
            raise ResourceFetchError(kind.value, exc) from exc
        getattr(snapshot, attr).extend(records)
        log.debug("fetched", kind=kind.value, count=len(records))
    return snapshot


async def render_cluster(source: ResourceSource, namespace: str, color: bool = False) -> str:
    """Fetch, build and render the tree for ``namespace``."""
    snapshot = await fetch_snapshot(source, namespace)
    root = build_tree(snapshot)
    return render_tree(root, Palette(enabled=color))


async def run(config: KubetreeConfig) -> str:
    """Render the tree for a live cluster described by ``config``."""
    log = get_logger("app")
    api_client = await connect(config.cluster.kubeconfig)
    try:
        source = KubernetesSource(api_client)
        output = await render_cluster(source, config.cluster.namespace, color=config.output.color)
    finally:
        await api_client.close()
    log.info("tree rendered", namespace=config.cluster.namespace or "*", lines=output.count("\n"))
    return output
