"""Tests for the outline renderer."""

from __future__ import annotations

from yamlite.codec import decodes
from yamlite.schemas import Node
from yamlite.tree_view import count_nodes, describe_node, render_tree, summarize, tree_depth


class TestRenderTree:
    """Tests for render_tree function."""

    def test_renders_entries_and_attributes(self, hero_document: Node) -> None:
        assert render_tree(hero_document).splitlines() == [
            "name = hero",
            "stats",
            "    @type = object",
            "    hp = 10",
            "        @type = int",
            "        @min = 0",
            "    mp = 4",
        ]

    def test_renders_lists_and_containers(self) -> None:
        root = decodes("_version: 2\nitems:\n- sword\na: 1\n    b: 2\n")

        assert render_tree(root).splitlines() == [
            "@version = 2",
            "items",
            "    - sword",
            "a = 1",
            "(container)",
            "    b = 2",
        ]

    def test_empty_document(self) -> None:
        assert render_tree(Node.container()) == ""


class TestCounts:
    """Tests for count_nodes, tree_depth and summarize."""

    def test_count_nodes_excludes_root(self, hero_document: Node) -> None:
        assert count_nodes(hero_document) == 4
        assert count_nodes(Node.container()) == 0

    def test_tree_depth(self, hero_document: Node) -> None:
        assert tree_depth(hero_document) == 2
        assert tree_depth(Node.container()) == 0

    def test_summarize(self, hero_document: Node) -> None:
        assert summarize(hero_document) == "Nodes: 4\nAttributes: 3\nDepth: 2"


class TestDescribeNode:
    """Tests for describe_node function."""

    def test_entry_without_value(self) -> None:
        assert describe_node(Node.entry("stats")) == "stats"

    def test_scalar(self) -> None:
        assert describe_node(Node.scalar("sword")) == "- sword"
