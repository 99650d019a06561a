"""Parent resolution from owner references with namespace fallback."""

from __future__ import annotations

from kubetree.graph.index import ResourceIndex, index_key
from kubetree.graph.models import TreeNode
from kubetree.models.resources import ResourceKind, ResourceRecord
from kubetree.observability.logging import get_logger

_logger = get_logger("graph.ownership")


def namespace_node(namespace: str, index: ResourceIndex, root: TreeNode) -> TreeNode:
    """Return the namespace's node, or the root when the namespace was not listed."""
    node = index.lookup(ResourceKind.NAMESPACE, namespace)
    if node is None:
        _logger.debug("namespace not indexed, using cluster root", namespace=namespace)
        return root
    return node


def resolve_parents(record: ResourceRecord, index: ResourceIndex, root: TreeNode) -> list[TreeNode]:
    """Return the candidate parents of ``record``, never empty.

    Cluster-scoped records hang from the root.  Namespaced records hang
    from every indexed owner, in owner-reference order, or from their
    namespace when no owner resolves.  Owner kinds that are not tracked
    count as misses.
    """
    if not record.namespace:
        return [root]

    if not record.owner_references:
        return [namespace_node(record.namespace, index, root)]

    parents: list[TreeNode] = []
    for ref in record.owner_references:
        owner = index.lookup(ref.kind, index_key(record.namespace, ref.name))
        if owner is None:
            _logger.debug(
                "owner not indexed",
                kind=record.kind.value,
                namespace=record.namespace,
                name=record.name,
                owner_kind=ref.kind,
                owner_name=ref.name,
            )
            continue
        parents.append(owner)

    if parents:
        return parents
    return [namespace_node(record.namespace, index, root)]
