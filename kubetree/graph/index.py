"""Per-build index of tree nodes keyed by kind and namespace/name."""

from __future__ import annotations

from collections.abc import Iterator

from kubetree.graph.models import TreeNode
from kubetree.models.resources import ResourceKind


def index_key(namespace: str, name: str) -> str:
    """``namespace/name`` for namespaced kinds, ``name`` for cluster-scoped ones."""
    if namespace:
        return f"{namespace}/{name}"
    return name


class ResourceIndex:
    """Two-level mapping kind -> key -> node.

    Owned by a single build pass.  Later registrations under the same key
    replace earlier ones; the cluster guarantees unique names per kind and
    namespace so this does not happen with real data.
    """

    def __init__(self) -> None:
        self._store: dict[str, dict[str, TreeNode]] = {kind.value: {} for kind in ResourceKind}

    def register(self, kind: str, key: str, node: TreeNode) -> None:
        self._store.setdefault(kind, {})[key] = node

    def lookup(self, kind: str, key: str) -> TreeNode | None:
        """Return the node or None, including for kinds that are not tracked."""
        return self._store.get(kind, {}).get(key)

    def nodes(self, kind: str) -> Iterator[TreeNode]:
        """Iterate a kind's nodes in registration order."""
        return iter(list(self._store.get(kind, {}).values()))

    def __len__(self) -> int:
        return sum(len(nodes) for nodes in self._store.values())
