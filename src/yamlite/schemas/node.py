"""Document tree models."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

from pydantic import BaseModel, Field


class NodeKind(str, Enum):
    """Role of a node, inferred from which of name/value are set."""

    CONTAINER = "container"
    SCALAR = "scalar"
    ENTRY = "entry"


class Node(BaseModel):
    """A node of a decoded document.

    The role of a node follows from its name and value:

    - both empty: a container (the document root, or a list wrapper);
    - name empty, value set: a bare scalar (a list element);
    - name set: a keyed entry, the value being optional.

    Attributes:
        name: Key of the entry, empty for containers and scalars.
        value: Scalar payload, empty when the node carries children instead.
        children: Owned child nodes; their order is kept when writing.
        attributes: Annotations written as ``_key: value`` lines, kept in
            first-insertion order.
    """

    name: str = ""
    value: str = ""
    children: list["Node"] = Field(default_factory=list)
    attributes: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def container(cls) -> Node:
        """Create an empty container node."""
        return cls()

    @classmethod
    def scalar(cls, value: str) -> Node:
        """Create a bare scalar, as used for list elements."""
        return cls(value=value)

    @classmethod
    def entry(cls, name: str, value: str = "") -> Node:
        """Create a keyed entry."""
        return cls(name=name, value=value)

    @property
    def kind(self) -> NodeKind:
        """Role of the node, derived from whether name and value are empty."""
        if self.name:
            return NodeKind.ENTRY
        if self.value:
            return NodeKind.SCALAR
        return NodeKind.CONTAINER

    def add_child(self, child: Node) -> Node:
        """Append ``child`` and return it, so calls can be chained."""
        self.children.append(child)
        return child

    def remove_child(self, child: Node) -> bool:
        """Remove ``child`` (matched by identity). Returns False if absent."""
        for index, existing in enumerate(self.children):
            if existing is child:
                del self.children[index]
                return True
        return False

    def find_child(self, name: str) -> Node | None:
        """Return the first child named ``name``."""
        for child in self.children:
            if child.name == name:
                return child
        return None

    def add_attribute(self, key: str, value: str) -> None:
        """Insert or overwrite an attribute.

        Overwriting keeps the key at the position of its first insertion.
        """
        self.attributes[key] = value

    set_attribute = add_attribute

    def find_attribute(self, key: str) -> str | None:
        return self.attributes.get(key)

    def remove_attribute(self, key: str) -> str | None:
        return self.attributes.pop(key, None)

    def clear_children(self) -> None:
        self.children.clear()

    def clear_attributes(self) -> None:
        self.attributes.clear()

    def walk(self) -> Iterator[Node]:
        """Iterate over this node and its descendants in pre-order."""
        pending = [self]
        while pending:
            node = pending.pop()
            yield node
            pending.extend(reversed(node.children))
