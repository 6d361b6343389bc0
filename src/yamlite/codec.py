"""Read and write indentation-based documents."""

from __future__ import annotations

import io
from typing import Iterable, TextIO

from yamlite.config import (
    ATTRIBUTE_PREFIX,
    DOCUMENT_START,
    INDENT_UNIT,
    SEQUENCE_MARKER,
)
from yamlite.schemas import Node, NodeKind
from yamlite.sections import Section, build_section_tree

_INDENT = " " * INDENT_UNIT
_BARE_SEQUENCE_MARKER = SEQUENCE_MARKER.strip()


def decode(stream: Iterable[str], *, into: Node | None = None) -> Node:
    """Decode a document from a stream of lines.

    Decoding never fails on content: lines that do not match the grammar
    degrade to plain nodes.

    Args:
        stream: Text stream (or any iterable of lines).
        into: Optional existing root to fill. Its children and attributes are
            cleared first.

    Returns:
        The root container of the decoded tree.
    """
    root = into if into is not None else Node.container()
    root.clear_children()
    root.clear_attributes()

    top_section = build_section_tree(stream)
    convert_sections(top_section, root, is_top=True)
    return root


def decodes(text: str) -> Node:
    """Decode a document held in a string."""
    return decode(text.splitlines())


def convert_sections(section: Section, parent: Node, *, is_top: bool = False) -> None:
    """Convert a section subtree into nodes attached under ``parent``.

    The top section maps onto ``parent`` itself. Sections whose name starts
    with ``_`` become attributes of their parent node and their children are
    ignored. The walk keeps its own stack, so nesting depth is unbounded.
    """
    pending: list[tuple[Section, Node, bool]] = [(section, parent, is_top)]

    while pending:
        current, owner, top = pending.pop()
        name, value = split_content(current.content)

        if name.startswith(ATTRIBUTE_PREFIX):
            owner.add_attribute(name[len(ATTRIBUTE_PREFIX) :], value)
            continue

        target = owner
        if not top:
            target = owner.add_child(Node(name=name, value=value))

        for child in reversed(current.children):
            pending.append((child, target, False))


def split_content(content: str) -> tuple[str, str]:
    """Split a trimmed line into ``(name, value)``.

    A leading ``- `` marks a list element; without a ``:`` its remainder is a
    bare scalar. Stripping the marker extends the plain ``name: value`` line
    grammar so that written lists read back as scalars. Any other line
    without a ``:`` is all name.
    """
    is_item = content == _BARE_SEQUENCE_MARKER or content.startswith(SEQUENCE_MARKER)
    if is_item:
        content = content[len(_BARE_SEQUENCE_MARKER) :].strip()

    name, separator, rest = content.partition(":")
    if not separator:
        if is_item:
            return "", content
        return content.strip(), ""
    return name.strip(), rest.strip()


def encode(root: Node, stream: TextIO) -> None:
    """Write ``root`` to ``stream``, starting with the ``---`` marker."""
    stream.write(DOCUMENT_START + "\n")
    writer = _DocumentWriter(stream)
    pending: list[tuple[Node, Node | None, int]] = [(root, None, 0)]
    while pending:
        node, parent, depth = pending.pop()
        writer.append(node, parent, depth)
        child_depth = depth + 1 if node.name else depth
        for child in reversed(node.children):
            pending.append((child, node, child_depth))
    writer.close_line()


def encodes(root: Node) -> str:
    """Encode ``root`` into a string."""
    buffer = io.StringIO()
    encode(root, buffer)
    return buffer.getvalue()


def copy_tree(source: Node) -> Node:
    """Return a deep copy of ``source`` with its own children and attributes."""
    copied = Node(name=source.name, value=source.value, attributes=dict(source.attributes))
    pending: list[tuple[Node, Node]] = [(source, copied)]
    while pending:
        original, duplicate = pending.pop()
        for child in original.children:
            created = duplicate.add_child(
                Node(name=child.name, value=child.value, attributes=dict(child.attributes))
            )
            pending.append((child, created))
    return copied


class _DocumentWriter:
    """Emit nodes line by line.

    A container that is a list element only writes its ``- `` marker and
    leaves the line open, so that its first child continues it.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._open_line: str | None = None

    def close_line(self) -> None:
        if self._open_line:
            self._write_line(self._open_line)
        self._open_line = None

    def append(self, node: Node, parent: Node | None, depth: int) -> None:
        """Write the line and attribute lines of ``node``, not its children."""
        indents = _INDENT * depth

        if _continues_parent_line(node, parent) and self._open_line is not None:
            prefix = self._open_line
            self._open_line = None
        else:
            self.close_line()
            prefix = indents if parent is not None else ""

        if parent is not None and _is_sequence(parent):
            if prefix.endswith((_INDENT, SEQUENCE_MARKER)):
                prefix = prefix[: -len(SEQUENCE_MARKER)]
            prefix += SEQUENCE_MARKER

        kind = node.kind
        if kind is NodeKind.ENTRY:
            self._write_line(f"{prefix}{node.name}: {node.value}")
        elif kind is NodeKind.SCALAR:
            self._write_line(prefix + node.value)
        else:
            self._open_line = prefix

        if node.attributes:
            self.close_line()
        for key, value in node.attributes.items():
            self._write_line(f"{indents}{_INDENT}{ATTRIBUTE_PREFIX}{key}: {value}")

    def _write_line(self, line: str) -> None:
        self._stream.write(line + "\n")


def _continues_parent_line(node: Node, parent: Node | None) -> bool:
    return (
        parent is not None
        and parent.kind is NodeKind.CONTAINER
        and parent.children[0] is node
    )


def _is_sequence(parent: Node) -> bool:
    return not parent.value and not parent.children[0].name
