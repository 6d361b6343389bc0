"""yamlite: read and write indentation-based structured documents."""

from yamlite.codec import copy_tree, decode, decodes, encode, encodes
from yamlite.exceptions import (
    DocumentIOError,
    DocumentNotFoundError,
    YamliteError,
)
from yamlite.files import (
    load_document,
    load_document_async,
    save_document,
    save_document_async,
)
from yamlite.schemas import Node, NodeKind

__all__ = [
    "DocumentIOError",
    "DocumentNotFoundError",
    "Node",
    "NodeKind",
    "YamliteError",
    "copy_tree",
    "decode",
    "decodes",
    "encode",
    "encodes",
    "load_document",
    "load_document_async",
    "save_document",
    "save_document_async",
]
