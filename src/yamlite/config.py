"""Local configuration for yamlite."""

from __future__ import annotations

import os


DOCUMENT_START = "---"
INDENT_UNIT = 2
SEQUENCE_MARKER = "- "
COMMENT_MARKER = "#"
ATTRIBUTE_PREFIX = "_"

DEFAULT_ENCODING = "utf-8"

# Text encoding used when documents are read from or written to disk.
YAMLITE_ENCODING = os.getenv("YAMLITE_ENCODING", DEFAULT_ENCODING)
