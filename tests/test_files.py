"""Tests for loading and saving document files."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from yamlite.exceptions import DocumentIOError, DocumentNotFoundError
from yamlite.files import (
    load_document,
    load_document_async,
    save_document,
    save_document_async,
)
from yamlite.schemas import Node


class TestLoadDocument:
    """Tests for load_document function."""

    def test_loads_and_decodes(self, tmp_path: Path) -> None:
        path = tmp_path / "hero.yaml"
        path.write_text("---\nname: hero\nstats:\n  hp: 10\n", encoding="utf-8")

        root = load_document(path)

        assert root.find_child("stats").find_child("hp").value == "10"

    def test_accepts_string_path(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.yaml"
        path.write_text("a: 1\n", encoding="utf-8")

        assert load_document(str(path)).children[0].value == "1"

    def test_missing_file_raises_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentNotFoundError, match="Document not found"):
            load_document(tmp_path / "missing.yaml")

    def test_directory_raises_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentIOError):
            load_document(tmp_path)

    def test_invalid_encoding_raises_io_error(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.yaml"
        path.write_bytes(b"name: caf\xe9\n")

        with pytest.raises(DocumentIOError, match="Failed to read"):
            load_document(path)

        assert load_document(path, encoding="latin-1").children[0].value == "café"

    def test_not_found_is_an_io_error(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentIOError):
            load_document(tmp_path / "missing.yaml")


class TestSaveDocument:
    """Tests for save_document function."""

    def test_writes_encoded_text(self, tmp_path: Path, hero_document: Node) -> None:
        path = save_document(hero_document, tmp_path / "hero.yaml")

        assert path.read_text(encoding="utf-8").startswith("---\nname: hero\nstats: \n")

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "dir" / "doc.yaml"

        save_document(Node.container(), path)

        assert path.read_text(encoding="utf-8") == "---\n"

    def test_wraps_os_errors(self, tmp_path: Path) -> None:
        with patch.object(Path, "write_text", side_effect=PermissionError("denied")):
            with pytest.raises(DocumentIOError, match="Failed to write"):
                save_document(Node.container(), tmp_path / "doc.yaml")

    def test_round_trip_through_file(self, tmp_path: Path, hero_document: Node) -> None:
        path = save_document(hero_document, tmp_path / "hero.yaml")

        assert load_document(path) == hero_document


class TestAsyncFiles:
    """Tests for the async load/save helpers."""

    @pytest.mark.asyncio
    async def test_save_then_load(self, tmp_path: Path, hero_document: Node) -> None:
        path = await save_document_async(hero_document, tmp_path / "hero.yaml")

        assert await load_document_async(path) == hero_document

    @pytest.mark.asyncio
    async def test_load_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(DocumentNotFoundError):
            await load_document_async(tmp_path / "missing.yaml")
