"""Test setup for yamlite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from yamlite.schemas import Node  # noqa: E402


@pytest.fixture
def hero_document() -> Node:
    """A small keyed document with nested entries and attributes."""
    root = Node.container()
    root.add_child(Node.entry("name", "hero"))
    stats = root.add_child(Node.entry("stats"))
    stats.add_attribute("type", "object")
    hp = stats.add_child(Node.entry("hp", "10"))
    hp.add_attribute("type", "int")
    hp.add_attribute("min", "0")
    stats.add_child(Node.entry("mp", "4"))
    return root
