"""Command line entry point for yamlite."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from yamlite.codec import encodes
from yamlite.config import YAMLITE_ENCODING
from yamlite.exceptions import YamliteError
from yamlite.files import load_document, save_document
from yamlite.schemas import Node
from yamlite.tree_view import render_tree, summarize

logger = logging.getLogger("yamlite")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yamlite", description="Read, reformat and inspect indentation-based documents."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    fmt = subparsers.add_parser("fmt", help="Rewrite a document in canonical form")
    fmt.add_argument("path", type=Path)
    fmt.add_argument("-o", "--output", type=Path, help="Write to this file instead of stdout")
    fmt.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if the document is not in canonical form",
    )

    tree = subparsers.add_parser("tree", help="Print the decoded document as an outline")
    tree.add_argument("path", type=Path)
    tree.add_argument("--summary", action="store_true", help="Append node and attribute counts")

    get = subparsers.add_parser("get", help="Print the value at a dotted key path")
    get.add_argument("path", type=Path)
    get.add_argument("key", help="Dotted path of entry names, e.g. stats.hp")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        document = load_document(args.path)
        if args.command == "fmt":
            return _format(document, args)
        if args.command == "tree":
            output = render_tree(document)
            if args.summary:
                output = f"{output}\n\n{summarize(document)}"
            print(output)
            return 0
        return _get(document, args.key)
    except YamliteError as exc:
        logger.error("%s", exc)
        return 2


def _format(document: Node, args: argparse.Namespace) -> int:
    text = encodes(document)
    if args.check:
        current = args.path.read_text(encoding=YAMLITE_ENCODING)
        if current != text:
            print(f"{args.path} is not in canonical form")
            return 1
        return 0
    if args.output:
        save_document(document, args.output)
    else:
        sys.stdout.write(text)
    return 0


def _get(document: Node, key: str) -> int:
    node: Node | None = document
    for part in key.split("."):
        node = node.find_child(part) if node is not None else None
    if node is None:
        logger.error("Key not found: %s", key)
        return 1
    print(node.value)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
