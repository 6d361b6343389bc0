"""Line hierarchy built while reading a document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable

from yamlite.config import COMMENT_MARKER, DOCUMENT_START, INDENT_UNIT

logger = logging.getLogger(__name__)

_SEQUENCE_CHAR = "-"


@dataclass
class Section:
    """One input line, placed in the hierarchy implied by its indentation.

    Fillers (empty content) bridge indentation jumps of more than one level.
    """

    content: str
    indentation: int
    parent: Section | None = field(default=None, repr=False, compare=False)
    children: list[Section] = field(default_factory=list)

    def add_child(self, child: Section) -> Section:
        child.parent = self
        self.children.append(child)
        return child

    @property
    def is_filler(self) -> bool:
        return not self.content


@dataclass
class ScannedLine:
    """Result of scanning the leading characters of a raw line."""

    indentation: int
    is_comment: bool = False


def scan_indentation(line: str) -> ScannedLine:
    """Compute the indentation of a raw line.

    Each leading space counts one unit. A ``-`` counts as a full level and ends
    the scan; a ``#`` ends the scan and marks the line as a comment.
    """
    indentation = 0
    for char in line:
        if char == " ":
            indentation += 1
        elif char == _SEQUENCE_CHAR:
            return ScannedLine(indentation + INDENT_UNIT)
        elif char == COMMENT_MARKER:
            return ScannedLine(indentation, is_comment=True)
        else:
            break
    return ScannedLine(indentation)


class SectionStack:
    """Cursor over a section tree, kept as the path from the root.

    The top of the stack is the section new lines are attached to.
    """

    def __init__(self, root: Section) -> None:
        self._stack: list[Section] = [root]

    @property
    def root(self) -> Section:
        return self._stack[0]

    @property
    def cursor(self) -> Section:
        return self._stack[-1]

    @property
    def depth(self) -> int:
        return len(self._stack) - 1

    def pop_levels(self, count: int) -> int:
        """Move the cursor up ``count`` levels, stopping at the root."""
        popped = 0
        while popped < count and len(self._stack) > 1:
            self._stack.pop()
            popped += 1
        return popped

    def push_filler(self, indentation: int) -> Section:
        filler = self.cursor.add_child(Section("", indentation))
        self._stack.append(filler)
        return filler

    def descend_into_last(self) -> bool:
        """Move the cursor onto its most recently appended child, if any."""
        if not self.cursor.children:
            return False
        self._stack.append(self.cursor.children[-1])
        return True

    def attach(self, content: str, indentation: int) -> Section:
        return self.cursor.add_child(Section(content, indentation))


def build_section_tree(lines: Iterable[str]) -> Section:
    """Arrange raw lines into a section tree rooted at a synthetic section.

    Args:
        lines: Raw lines, with or without their line terminators.

    Returns:
        The synthetic root section (indentation 0, empty content).
    """
    stack = SectionStack(Section("", 0))
    last_indentation = 0
    line_count = 0
    comments = 0
    fillers = 0

    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        line_count += 1
        if line == DOCUMENT_START:
            continue

        scanned = scan_indentation(line)
        if scanned.is_comment:
            comments += 1
            continue

        indentation = scanned.indentation
        if indentation < last_indentation:
            stack.pop_levels((last_indentation - indentation) // INDENT_UNIT)
        elif indentation > last_indentation:
            for level in range((indentation - last_indentation) // INDENT_UNIT - 1):
                stack.push_filler(last_indentation + (level + 1) * INDENT_UNIT)
                fillers += 1

        if indentation - last_indentation == INDENT_UNIT:
            stack.descend_into_last()

        stack.attach(line.strip(), indentation)
        last_indentation = indentation

    logger.debug(
        "Read %d lines (%d comments, %d filler sections)",
        line_count,
        comments,
        fillers,
    )
    return stack.root
