"""Command-line interface for rendering SVG elements."""

import argparse
import logging
import sys
from pathlib import Path

import yaml

from . import ELEMENTS
from .attributes import apply_attribute
from .config import DefaultsConfig, attributes_from_list, load_defaults_config
from .defaults import use_defaults
from .document import Svg
from .errors import SvgTagError
from .values import VOCABULARIES

LOGGER = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="svgtag",
        description="Build and validate SVG markup from the command line",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- values subcommand ---
    values_parser = subparsers.add_parser(
        "values",
        help="List attribute value vocabularies, or the values of one",
    )
    values_parser.add_argument(
        "name",
        nargs="?",
        help="Vocabulary name (e.g. FillRule)",
    )

    # --- render subcommand ---
    render_parser = subparsers.add_parser(
        "render",
        help="Render a single element",
    )
    render_parser.add_argument(
        "element",
        help="Element tag name (e.g. circle, linearGradient)",
    )
    render_parser.add_argument(
        "-a", "--attr",
        action="append",
        metavar="NAME=VALUE",
        help="Attribute to set; repeatable",
    )
    render_parser.add_argument(
        "--content",
        default="",
        help="Raw markup placed inside block elements",
    )
    render_parser.add_argument(
        "--defaults",
        type=Path,
        help="YAML file with per-tag defaults and themes",
    )
    render_parser.add_argument(
        "--theme",
        help="Theme name from the defaults file",
    )

    # --- inline subcommand ---
    inline_parser = subparsers.add_parser(
        "inline",
        help="Render an SVG file with extra attributes and a title",
    )
    inline_parser.add_argument(
        "svg_file",
        type=Path,
        help="SVG file to read",
    )
    inline_parser.add_argument("--title", help="Accessible title inserted as <title>")
    inline_parser.add_argument(
        "-a", "--attr",
        action="append",
        metavar="NAME=VALUE",
        help="Attribute to set on the <svg> element; repeatable",
    )

    return parser


def _find_element(name: str):
    if name in ELEMENTS:
        return ELEMENTS[name]
    lowered = {tag.lower(): cls for tag, cls in ELEMENTS.items()}
    return lowered.get(name.lower())


def cmd_values(args: argparse.Namespace) -> int:
    """Execute values subcommand."""
    if args.name is None:
        for name in sorted(VOCABULARIES):
            print(name)
        return 0

    vocabulary = VOCABULARIES.get(args.name)
    if vocabulary is None:
        print(f"Error: Unknown vocabulary: {args.name}", file=sys.stderr)
        return 1

    for value in vocabulary.values():
        print(value)
    return 0


def cmd_render(args: argparse.Namespace) -> int:
    """Execute render subcommand."""
    cls = _find_element(args.element)
    if cls is None:
        print(f"Error: Unknown element: {args.element}", file=sys.stderr)
        return 1

    try:
        config = load_defaults_config(args.defaults) if args.defaults else DefaultsConfig()
        attributes = attributes_from_list(args.attr)
        with use_defaults(config.to_registry()):
            builder = cls.tag()
        for name, value in attributes.items():
            builder = apply_attribute(builder, name, value)
        if args.theme:
            builder = builder.add_theme_provider(args.theme, config.theme_provider())
        if args.content:
            builder = builder.content(args.content)
        markup = builder.render()
    except (SvgTagError, ValueError, yaml.YAMLError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(markup)
    return 0


def cmd_inline(args: argparse.Namespace) -> int:
    """Execute inline subcommand."""
    try:
        builder = Svg.tag().file_path(args.svg_file)
        for name, value in attributes_from_list(args.attr).items():
            builder = apply_attribute(builder, name, value)
        if args.title:
            builder = builder.title(args.title)
        markup = builder.render()
    except (SvgTagError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not markup:
        print(f"Error: No <svg> element rendered from {args.svg_file}", file=sys.stderr)
        return 1

    print(markup)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    LOGGER.debug("Running %s", args.command)

    if args.command == "values":
        sys.exit(cmd_values(args))
    elif args.command == "render":
        sys.exit(cmd_render(args))
    elif args.command == "inline":
        sys.exit(cmd_inline(args))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
