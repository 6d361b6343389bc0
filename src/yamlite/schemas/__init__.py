"""Shared schemas for yamlite."""

from yamlite.schemas.node import Node, NodeKind

__all__ = ["Node", "NodeKind"]
