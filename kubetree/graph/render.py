"""Indented text rendering of the ownership tree."""

from __future__ import annotations

import click

from kubetree.graph.models import Health, TreeNode
from kubetree.models.resources import ResourceKind

INDENT_UNIT = "  "

_HEALTH_COLORS: dict[Health, str] = {
    Health.OK: "green",
    Health.WARNING: "yellow",
    Health.CRITICAL: "red",
}


class Palette:
    """Maps health to terminal styling.  A disabled palette is a no-op."""

    def __init__(self, enabled: bool = False) -> None:
        self.enabled = enabled

    def title(self, text: str, health: Health) -> str:
        color = _HEALTH_COLORS.get(health)
        if not self.enabled or color is None:
            return text
        return click.style(text, fg=color)


def child_sort_key(node: TreeNode) -> tuple[int, str]:
    """Services first, then other kinds by kind name."""
    if node.kind == ResourceKind.SERVICE:
        return (0, "")
    return (1, node.kind)


def sorted_children(node: TreeNode) -> list[TreeNode]:
    # sorted() is stable: ties keep attachment order.
    return sorted(node.children.values(), key=child_sort_key)


def render_tree(root: TreeNode, palette: Palette | None = None) -> str:
    """Render ``root`` and its descendants, one newline-terminated line per node."""
    palette = palette or Palette()
    lines: list[str] = []
    _render(root, "", palette, lines)
    return "".join(lines)


def _render(node: TreeNode, indent: str, palette: Palette, lines: list[str]) -> None:
    line = indent + palette.title(node.title, node.health)
    if node.detail:
        line += f" -- {node.detail}"
    lines.append(line + "\n")

    for child in sorted_children(node):
        _render(child, indent + INDENT_UNIT, palette, lines)
