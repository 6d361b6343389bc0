"""Render decoded documents as a readable outline."""

from __future__ import annotations

from yamlite.schemas import Node, NodeKind


def render_tree(root: Node) -> str:
    """Render the nodes under ``root`` as an indented outline."""
    lines: list[str] = []
    pending: list[tuple[Node, int]] = [(root, -1)]
    while pending:
        node, depth = pending.pop()
        if depth >= 0:
            lines.append(" " * (depth * 4) + describe_node(node))
        indent = " " * ((depth + 1) * 4)
        for key, value in node.attributes.items():
            lines.append(f"{indent}@{key} = {value}")
        for child in reversed(node.children):
            pending.append((child, depth + 1))
    return "\n".join(lines)


def count_nodes(root: Node) -> int:
    """Count the nodes below ``root`` (the root itself is not counted)."""
    return sum(1 for _ in root.walk()) - 1


def tree_depth(root: Node) -> int:
    """Number of levels below ``root``; 0 for a node without children."""
    deepest = 0
    pending: list[tuple[Node, int]] = [(root, 0)]
    while pending:
        node, depth = pending.pop()
        deepest = max(deepest, depth)
        pending.extend((child, depth + 1) for child in node.children)
    return deepest


def summarize(root: Node) -> str:
    """Summarize node, attribute and depth counts, one per line."""
    attributes = sum(len(node.attributes) for node in root.walk())
    lines = [
        f"Nodes: {count_nodes(root)}",
        f"Attributes: {attributes}",
        f"Depth: {tree_depth(root)}",
    ]
    return "\n".join(lines)


def describe_node(node: Node) -> str:
    """One-line label of a node as shown in the outline."""
    if node.kind is NodeKind.ENTRY:
        return f"{node.name} = {node.value}" if node.value else node.name
    if node.kind is NodeKind.SCALAR:
        return f"- {node.value}"
    return "(container)"
