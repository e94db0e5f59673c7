"""Command-line interface for selector-kit."""

import argparse
import json
import logging
import sys

from selector_kit.builder import SelectorBuilder
from selector_kit.combiner import combine
from selector_kit.errors import SelectorError
from selector_kit.models import Category, Renderable

logger = logging.getLogger(__name__)

# Combinator tokens on the command line; "descendant" stands for " "
COMBINATOR_TOKENS = {"+": "+", "~": "~", ">": ">", "descendant": " "}

CATEGORY_NAMES = {category.label: category for category in Category}
CATEGORY_NAMES["attr"] = Category.ATTRIBUTE


class TokenError(Exception):
    """A command-line token could not be interpreted."""


def setup_logging(verbose: bool = False):
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="selector-kit",
        description="Build CSS selector strings from ordered fragments",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log each fragment as it is added",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    build_parser = subparsers.add_parser(
        "build",
        help="Render a selector from fragments and combinators",
    )
    build_parser.add_argument(
        "tokens",
        nargs="+",
        metavar="TOKEN",
        help=(
            "Fragment as category=value (element, id, class, attr, "
            "pseudo-class, pseudo-element) or a combinator (+, ~, >, descendant)"
        ),
    )
    build_parser.add_argument(
        "--json",
        action="store_true",
        help='Print {"selector": ...} instead of the bare selector',
    )

    return parser


def parse_fragment(token: str) -> tuple[Category, str]:
    """Split a 'category=value' token.

    Raises:
        TokenError: If the token has no '=' or names an unknown category
    """
    name, sep, value = token.partition("=")
    if not sep:
        raise TokenError(f"Expected category=value or a combinator, got {token!r}")
    category = CATEGORY_NAMES.get(name.strip().lower())
    if category is None:
        raise TokenError(f"Unknown selector category: {name!r}")
    return category, value


def build_from_tokens(tokens: list[str]) -> Renderable:
    """Build a selector from command-line tokens.

    Fragments accumulate into one builder until a combinator token, which
    joins everything so far with the builder that follows it.

    Raises:
        TokenError: If a token is malformed or a combinator has no operand
        SelectorError: If fragments violate ordering or repeat a singleton
    """
    result: Renderable | None = None
    pending: str | None = None
    builder: SelectorBuilder | None = None

    for token in tokens:
        if token in COMBINATOR_TOKENS:
            if builder is None:
                raise TokenError(f"Combinator {token!r} has no selector before it")
            result = builder if result is None else combine(result, pending, builder)
            pending = COMBINATOR_TOKENS[token]
            builder = None
            continue

        category, value = parse_fragment(token)
        if builder is None:
            builder = SelectorBuilder()
        builder.add(category, value)

    if builder is None:
        raise TokenError("Selector ends with a combinator")
    if result is None:
        return builder
    return combine(result, pending, builder)


def run_build(tokens: list[str], as_json: bool = False) -> int:
    """Run the build command."""
    logger.info(f"Building selector from {len(tokens)} tokens")
    try:
        selector = build_from_tokens(tokens).render()
    except (TokenError, SelectorError) as e:
        logger.error(f"Could not build selector: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps({"selector": selector}))
    else:
        print(selector)
    return 0


def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_parser()
    try:
        parsed = parser.parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 1

    setup_logging(parsed.verbose)

    if parsed.command is None:
        parser.print_help(sys.stderr)
        return 1

    if parsed.command == "build":
        return run_build(parsed.tokens, parsed.json)

    return 1


def main():
    """Entry point for the CLI."""
    sys.exit(run_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
