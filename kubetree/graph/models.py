"""Data structures for the resource ownership tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from kubetree.models.resources import ResourceKind, ResourceRecord

CLUSTER_KIND = "cluster"
CLUSTER_TITLE = "kubernetes"

TITLE_PREFIXES: dict[str, str] = {
    ResourceKind.NAMESPACE: "ns",
    ResourceKind.DEPLOYMENT: "deploy",
    ResourceKind.REPLICA_SET: "rs",
    ResourceKind.STATEFUL_SET: "statefulsets",
    ResourceKind.DAEMON_SET: "ds",
    ResourceKind.POD: "po",
    ResourceKind.SERVICE: "svc",
    ResourceKind.PERSISTENT_VOLUME_CLAIM: "pvc",
    ResourceKind.PERSISTENT_VOLUME: "pv",
}


class Health(StrEnum):
    """Operational readiness of a single resource."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"
    UNSET = "unset"


@dataclass(eq=False)
class TreeNode:
    """One entry in the rendered tree.

    ``parent`` is the canonical parent used by upward walks; it is the last
    parent assigned.  ``attached_under`` lists every parent that holds this
    node as a child, which is what shapes the rendered tree.  The two can
    disagree when a resource has several resolvable owners.
    """

    kind: str
    namespace: str
    name: str
    title: str
    record: ResourceRecord | None = None
    health: Health = Health.OK
    detail: str = ""
    parent: TreeNode | None = None
    attached_under: list[TreeNode] = field(default_factory=list)
    children: dict[str, TreeNode] = field(default_factory=dict)
    provisional: bool = False  # attached only by namespace/root fallback

    def attach(self, parent: TreeNode) -> None:
        """Register under ``parent`` and make it the canonical parent."""
        parent.children[self.title] = self
        if parent not in self.attached_under:
            self.attached_under.append(parent)
        self.parent = parent

    def detach(self, parent: TreeNode) -> None:
        if parent.children.get(self.title) is self:
            del parent.children[self.title]
        if parent in self.attached_under:
            self.attached_under.remove(parent)
        if self.parent is parent:
            self.parent = self.attached_under[-1] if self.attached_under else None

    def relink(self, parent: TreeNode) -> None:
        """Attach under a cross-referenced parent.

        The first relink drops the provisional fallback attachment; later
        relinks add further parents.
        """
        if self.provisional:
            for previous in list(self.attached_under):
                self.detach(previous)
            self.provisional = False
        self.attach(parent)

    def __repr__(self) -> str:
        return f"TreeNode({self.title!r}, health={self.health.value})"


def make_title(kind: str, name: str) -> str:
    return f"{TITLE_PREFIXES[kind]}/{name}"


def new_cluster_root() -> TreeNode:
    """Create the synthetic cluster node every tree hangs from."""
    return TreeNode(
        kind=CLUSTER_KIND,
        namespace="",
        name=CLUSTER_TITLE,
        title=CLUSTER_TITLE,
        health=Health.UNSET,
    )
