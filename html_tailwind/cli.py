"""
Command-line interface for html_tailwind.

Usage:
    html-tailwind page.html
    html-tailwind page.html --format yaml
    html-tailwind page.html --verbose
"""

import argparse
import sys
from typing import List, Optional

import yaml

from html_tailwind.core.exceptions import DocumentLoadError
from html_tailwind.core.models import Image
from html_tailwind.core.services import DocumentService
from html_tailwind.core.tree import NodeVisitor, node_kind, style_to_dict, tree_to_dict
from html_tailwind.logging_config import setup_logging


class _TreePrinter(NodeVisitor):
    """Collects an indented one-line-per-node outline of a tree."""

    def __init__(self) -> None:
        self.lines: List[str] = []
        self._depth = 0

    def _enter(self, node) -> None:
        label = node_kind(node)
        if node.id:
            label += f"#{node.id}"
        if isinstance(node, Image):
            label += f" src={node.src!r} -> {node.image}"
        elif node.content:
            label += f" {node.content!r}"
        style = style_to_dict(node.style)
        style.pop("font", None)
        if style:
            label += " " + ", ".join(f"{k}={v}" for k, v in style.items())
        self.lines.append("  " * self._depth + label)
        self._depth += 1
        self.visit_children(node)

    enter_container = _enter
    enter_text = _enter
    enter_image = _enter
    enter_button = _enter

    def exit(self, node) -> None:
        self._depth -= 1


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="html-tailwind",
        description="Convert an HTML/XML document with utility classes into a node tree",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  html-tailwind ui/main.html
  html-tailwind ui/main.html --format yaml
        """,
    )
    parser.add_argument("input", help="Input .html or .xml document")
    parser.add_argument(
        "-f", "--format",
        choices=["text", "yaml"],
        default="text",
        help="Output format (default: text)"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose)

    service = DocumentService()
    try:
        handle = service.load(args.input)
    except DocumentLoadError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.format == "yaml":
        print(yaml.safe_dump(tree_to_dict(handle.tree.root), sort_keys=False, allow_unicode=True), end="")
    else:
        printer = _TreePrinter()
        handle.tree.apply(printer)
        print("\n".join(printer.lines))
    return 0


if __name__ == "__main__":
    sys.exit(main())
