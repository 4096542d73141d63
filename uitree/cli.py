"""Command-line interface for uitree."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional, Sequence

from .builder import element_to_json, load_element
from .config import load_config
from .element import Element
from .errors import UITreeError
from .io_utils import warn, write_text
from .page import Page


def _load(path: Path) -> Element:
    if not path.exists():
        raise SystemExit(f"Element document not found: {path}")
    try:
        return load_element(path)
    except UITreeError as exc:
        raise SystemExit(str(exc)) from exc


def _outline(root: Element) -> str:
    lines: list[str] = []
    for depth, node in root.walk():
        label = f"{node.id} [{node.content_type or '-'}]"
        if node.text:
            label += f" {node.text!r}"
        lines.append("  " * depth + label)
    return "\n".join(lines) + "\n"


def _handle_show(args: argparse.Namespace) -> None:
    sys.stdout.write(_outline(_load(Path(args.document))))


def _handle_normalize(args: argparse.Namespace) -> None:
    output = element_to_json(_load(Path(args.document)))
    if args.out:
        write_text(Path(args.out), output)
    else:
        sys.stdout.write(output)


def _handle_render(args: argparse.Namespace) -> None:
    try:
        config = load_config(Path(args.config) if args.config else None)
    except UITreeError as exc:
        raise SystemExit(str(exc)) from exc
    if args.template_paths:
        config = config.with_template_paths(*args.template_paths)
    if config.verbose:
        warn("Settings:")
        for line in config.describe():
            warn(line)

    root = _load(Path(args.document))
    page = Page(config, args.title or root.text or root.id, default_template=args.template)
    page.set_data(root)
    if args.nav:
        page.add_navigation(_load(Path(args.nav)))

    try:
        if args.out:
            page.write(Path(args.out))
        else:
            sys.stdout.write(page.render())
    except UITreeError as exc:
        raise SystemExit(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="uitree", description="Build and render element trees.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    show = subparsers.add_parser("show", help="Print the element tree outline in display order.")
    show.add_argument("document", help="Element document (.json, .yaml or .yml)")
    show.set_defaults(func=_handle_show)

    normalize = subparsers.add_parser("normalize", help="Re-emit a document as stable JSON.")
    normalize.add_argument("document", help="Element document (.json, .yaml or .yml)")
    normalize.add_argument("--out", help="Write to this path instead of stdout")
    normalize.set_defaults(func=_handle_normalize)

    render = subparsers.add_parser("render", help="Render a document into an HTML page.")
    render.add_argument("document", help="Element document used as page data")
    render.add_argument("--nav", help="Element document used as page navigation")
    render.add_argument("--template", default="page.html", help="Template name to render")
    render.add_argument("--config", help="Path to a uitree.yaml settings file")
    render.add_argument(
        "--template-path",
        action="append",
        dest="template_paths",
        help="Extra template search directory (repeatable)",
    )
    render.add_argument("--title", help="Page title; defaults to the root text or id")
    render.add_argument("--out", help="Write to this path instead of stdout")
    render.set_defaults(func=_handle_render)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
