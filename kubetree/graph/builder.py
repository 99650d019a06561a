"""Single-pass tree builder.

Ingests a ResourceSnapshot kind by kind in dependency order so that every
owner kind is indexed before its dependents:

    namespaces -> deployments -> replica sets -> stateful sets
    -> daemon sets -> claims -> volumes -> services -> pods

Volumes are linked to claims as they are ingested, pods to claims as they
are ingested, and services to controllers once every pod is indexed.
"""

from __future__ import annotations

from collections.abc import Sequence

from kubetree.graph import linker
from kubetree.graph.health import classify
from kubetree.graph.index import ResourceIndex, index_key
from kubetree.graph.models import TreeNode, make_title, new_cluster_root
from kubetree.graph.ownership import namespace_node, resolve_parents
from kubetree.models.resources import ResourceRecord, ResourceSnapshot
from kubetree.observability.logging import get_logger

_logger = get_logger("graph.builder")


class TreeBuilder:
    """Builds one ownership forest under a synthetic cluster root.

    A builder owns its index and is used for exactly one build.
    """

    def __init__(self) -> None:
        self.root: TreeNode = new_cluster_root()
        self.index = ResourceIndex()
        self._built = False

    def build(self, snapshot: ResourceSnapshot) -> TreeNode:
        """Assemble the tree and return its root."""
        if self._built:
            raise RuntimeError("TreeBuilder instances build a single tree")
        self._built = True

        self._add_namespaces(snapshot)
        self._add_owned(snapshot.deployments)
        self._add_owned(snapshot.replica_sets)
        self._add_owned(snapshot.stateful_sets)
        self._add_owned(snapshot.daemon_sets)
        self._add_claims(snapshot)
        self._add_volumes(snapshot)
        services = self._add_services(snapshot)
        self._add_pods(snapshot)
        self._link_services(services)

        _logger.debug("tree built", nodes=len(self.index))
        return self.root

    # ------------------------------------------------------------------
    # Ingestion helpers
    # ------------------------------------------------------------------

    def _new_node(self, record: ResourceRecord) -> TreeNode:
        """Create an unregistered node; callers register it with ``_register``."""
        health, detail = classify(record)
        node = TreeNode(
            kind=record.kind,
            namespace=record.namespace,
            name=record.name,
            title=make_title(record.kind, record.name),
            record=record,
            health=health,
            detail=detail,
        )
        return node

    def _register(self, node: TreeNode) -> TreeNode:
        self.index.register(node.kind, index_key(node.namespace, node.name), node)
        return node

    def _add_namespaces(self, snapshot: ResourceSnapshot) -> None:
        for record in snapshot.namespaces:
            self._register(self._new_node(record)).attach(self.root)
        _logger.debug("namespaces ingested", count=len(snapshot.namespaces))

    def _add_owned(self, records: Sequence[ResourceRecord]) -> None:
        """Ingest records placed purely by ownership.

        The node is listed under every resolved owner; the last one is its
        canonical parent.
        """
        for record in records:
            # Owners resolve before the node is indexed, so a self reference is a miss.
            node = self._new_node(record)
            for parent in resolve_parents(record, self.index, self.root):
                node.attach(parent)
            self._register(node)
        if records:
            _logger.debug("records ingested", kind=records[0].kind.value, count=len(records))

    def _add_provisional(self, record: ResourceRecord) -> TreeNode:
        """Ingest a record whose real parent comes from a cross-reference."""
        node = self._register(self._new_node(record))
        if record.namespace:
            node.attach(namespace_node(record.namespace, self.index, self.root))
        else:
            node.attach(self.root)
        node.provisional = True
        return node

    def _add_claims(self, snapshot: ResourceSnapshot) -> None:
        for record in snapshot.claims:
            self._add_provisional(record)
        _logger.debug("claims ingested", count=len(snapshot.claims))

    def _add_volumes(self, snapshot: ResourceSnapshot) -> None:
        linked = 0
        for record in snapshot.volumes:
            node = self._add_provisional(record)
            if linker.link_volume_claim(node, self.index):
                linked += 1
        _logger.debug("volumes ingested", count=len(snapshot.volumes), bound=linked)

    def _add_services(self, snapshot: ResourceSnapshot) -> list[TreeNode]:
        services = [self._add_provisional(record) for record in snapshot.services]
        _logger.debug("services ingested", count=len(services))
        return services

    def _add_pods(self, snapshot: ResourceSnapshot) -> None:
        for record in snapshot.pods:
            node = self._new_node(record)
            linker.link_pod_claims(node, self.index)
            for parent in resolve_parents(record, self.index, self.root):
                node.attach(parent)
            self._register(node)
        _logger.debug("pods ingested", count=len(snapshot.pods))

    def _link_services(self, services: list[TreeNode]) -> None:
        for service in services:
            linker.link_service(service, self.index)


def build_tree(snapshot: ResourceSnapshot) -> TreeNode:
    """Build the ownership tree for ``snapshot`` and return the cluster root."""
    return TreeBuilder().build(snapshot)
