"""Load and save documents on the local filesystem."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from yamlite.codec import decodes, encodes
from yamlite.config import YAMLITE_ENCODING
from yamlite.exceptions import DocumentIOError, DocumentNotFoundError
from yamlite.schemas import Node

logger = logging.getLogger(__name__)


def load_document(path: Path | str, *, encoding: str | None = None) -> Node:
    """Read and decode a document file.

    Args:
        path: Path to the document.
        encoding: Text encoding. Defaults to ``YAMLITE_ENCODING``.

    Returns:
        The root container of the decoded document.

    Raises:
        DocumentNotFoundError: If the file does not exist.
        DocumentIOError: If the file cannot be read.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding=encoding or YAMLITE_ENCODING)
    except FileNotFoundError as exc:
        raise DocumentNotFoundError(f"Document not found: {path}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise DocumentIOError(f"Failed to read {path}: {exc}") from exc

    logger.debug("Loaded %s (%d characters)", path, len(text))
    return decodes(text)


def save_document(
    node: Node,
    path: Path | str,
    *,
    encoding: str | None = None,
    make_parents: bool = True,
) -> Path:
    """Encode ``node`` and write it to ``path``.

    Raises:
        DocumentIOError: If the file cannot be written.
    """
    path = Path(path)
    text = encodes(node)
    try:
        if make_parents:
            path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding=encoding or YAMLITE_ENCODING)
    except OSError as exc:
        raise DocumentIOError(f"Failed to write {path}: {exc}") from exc

    logger.debug("Saved %s (%d characters)", path, len(text))
    return path


async def load_document_async(path: Path | str, *, encoding: str | None = None) -> Node:
    """Async variant of :func:`load_document` running in a thread pool."""
    return await asyncio.to_thread(load_document, path, encoding=encoding)


async def save_document_async(
    node: Node,
    path: Path | str,
    *,
    encoding: str | None = None,
    make_parents: bool = True,
) -> Path:
    """Async variant of :func:`save_document` running in a thread pool."""
    return await asyncio.to_thread(
        save_document, node, path, encoding=encoding, make_parents=make_parents
    )
