"""Tests for tree rendering: ordering, indentation and styling."""

from __future__ import annotations

import click

from kubetree.graph.models import Health, TreeNode, new_cluster_root
from kubetree.graph.render import Palette, render_tree, sorted_children


def _make_node(kind: str, title: str, health: Health = Health.OK, detail: str = "") -> TreeNode:
    return TreeNode(kind=kind, namespace="default", name=title.split("/")[-1], title=title, health=health, detail=detail)


class TestRenderTree:
    def test_empty_tree_is_root_line(self) -> None:
        assert render_tree(new_cluster_root()) == "kubernetes\n"

    def test_single_namespace(self) -> None:
        root = new_cluster_root()
        _make_node("Namespace", "ns/kube-system", health=Health.UNSET).attach(root)
        assert render_tree(root) == "kubernetes\n  ns/kube-system\n"

    def test_detail_is_appended(self) -> None:
        root = new_cluster_root()
        ns = _make_node("Namespace", "ns/default", health=Health.UNSET)
        ns.attach(root)
        _make_node("Deployment", "deploy/web", detail="1/1 av, 1/1 up to date").attach(ns)
        assert render_tree(root) == ("kubernetes\n  ns/default\n    deploy/web -- 1/1 av, 1/1 up to date\n")

    def test_multi_parent_node_renders_under_each(self) -> None:
        root = new_cluster_root()
        rs_a = _make_node("ReplicaSet", "rs/a")
        rs_b = _make_node("ReplicaSet", "rs/b")
        rs_a.attach(root)
        rs_b.attach(root)
        pod = _make_node("Pod", "po/shared")
        pod.attach(rs_a)
        pod.attach(rs_b)
        assert render_tree(root) == ("kubernetes\n  rs/a\n    po/shared\n  rs/b\n    po/shared\n")


class TestChildOrdering:
    def test_services_first_then_kind_name(self) -> None:
        parent = _make_node("Deployment", "deploy/web")
        for kind, title in [
            ("ReplicaSet", "rs/web-1"),
            ("Pod", "po/debug"),
            ("Service", "svc/web"),
            ("PersistentVolumeClaim", "pvc/data"),
            ("Service", "svc/admin"),
        ]:
            _make_node(kind, title).attach(parent)
        assert [c.title for c in sorted_children(parent)] == [
            "svc/web",
            "svc/admin",
            "pvc/data",
            "po/debug",
            "rs/web-1",
        ]

    def test_ties_keep_attachment_order(self) -> None:
        parent = _make_node("ReplicaSet", "rs/web")
        for name in ("web-c", "web-a", "web-b"):
            _make_node("Pod", f"po/{name}").attach(parent)
        assert [c.title for c in sorted_children(parent)] == ["po/web-c", "po/web-a", "po/web-b"]


class TestPalette:
    def test_disabled_palette_is_plain(self) -> None:
        assert Palette(enabled=False).title("po/web", Health.CRITICAL) == "po/web"

    def test_enabled_palette_colors_by_health(self) -> None:
        palette = Palette(enabled=True)
        assert palette.title("po/a", Health.OK) == click.style("po/a", fg="green")
        assert palette.title("po/b", Health.WARNING) == click.style("po/b", fg="yellow")
        assert palette.title("po/c", Health.CRITICAL) == click.style("po/c", fg="red")

    def test_unset_is_never_styled(self) -> None:
        assert Palette(enabled=True).title("ns/default", Health.UNSET) == "ns/default"

    def test_detail_is_not_styled(self) -> None:
        root = new_cluster_root()
        _make_node("Pod", "po/web", health=Health.CRITICAL, detail="0/1 up, 0/1 rdy (failed)").attach(root)
        output = render_tree(root, Palette(enabled=True))
        assert output.splitlines()[1] == "  " + click.style("po/web", fg="red") + " -- 0/1 up, 0/1 rdy (failed)"
        assert click.unstyle(output) == "kubernetes\n  po/web -- 0/1 up, 0/1 rdy (failed)\n"
