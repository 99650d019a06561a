"""Resource ownership tree.

Builds an in-memory forest from flat resource collections (ownerReferences,
Service selectors, Pod -> PVC volume mounts, PV -> PVC claim refs), classifies
each node's health and renders the result as an indented text tree.
"""

from kubetree.graph.builder import TreeBuilder, build_tree
from kubetree.graph.health import classify
from kubetree.graph.index import ResourceIndex, index_key
from kubetree.graph.models import Health, TreeNode
from kubetree.graph.render import Palette, render_tree

__all__ = [
    "Health",
    "Palette",
    "ResourceIndex",
    "TreeBuilder",
    "TreeNode",
    "build_tree",
    "classify",
    "index_key",
    "render_tree",
]
