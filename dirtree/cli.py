"""Command-line front door for dirtree.

Interprets the positional ``[directory] [max_depth]`` tokens, resolves the
target directory, and writes the tree report to stdout through a buffer
that is flushed once the walk completes.
"""

from __future__ import annotations

import argparse
import logging
import os
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_MAX_DEPTH, MAX_DEPTH_LIMIT, load_config, load_default_depth, load_icons
from .errors import ArgumentParseError, DirTreeError, PathResolutionError
from .output import BufferedOutput, passthrough_undecodable
from .traverse import render_tree

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY = "."
HELP_FLAGS = ("-h", "--help")

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

USAGE_TEMPLATE = """
Usage: {prog} [directory] [max_depth]

Arguments:
  directory   The directory to list (default: current working directory)
  max_depth   Maximum depth to traverse (default: {default_depth})

Options:
  -h, --help       Show this help message
  -v, --verbose    Log traversal details to stderr
  --config PATH    Read preferences from PATH instead of the user config file
"""


@dataclass(frozen=True)
class ParsedArgs:
    dir_path: str
    max_depth: int


def usage_text(prog: str, default_depth: int = DEFAULT_MAX_DEPTH) -> str:
    return USAGE_TEMPLATE.format(prog=prog, default_depth=default_depth)


def parse_depth(token: str) -> int | None:
    """Parse a depth token.

    Returns ``None`` when ``token`` is not an integer at all. Integers that
    are negative or above ``MAX_DEPTH_LIMIT`` raise ``ArgumentParseError``.
    """
    if not _INTEGER_RE.fullmatch(token):
        return None
    value = int(token)
    if value < 0:
        raise ArgumentParseError(f"max_depth must be >= 0, got {token!r}")
    if value > MAX_DEPTH_LIMIT:
        raise ArgumentParseError(f"max_depth must be <= {MAX_DEPTH_LIMIT}, got {token!r}")
    return value


def parse_args(tokens: Sequence[str], default_depth: int = DEFAULT_MAX_DEPTH) -> ParsedArgs:
    """Interpret up to two positional tokens as ``(directory, max_depth)``.

    A lone token is a depth when it is an integer and a directory otherwise.
    With two tokens the second must be an integer depth.
    """
    if len(tokens) == 0:
        return ParsedArgs(DEFAULT_DIRECTORY, default_depth)
    if len(tokens) == 1:
        depth = parse_depth(tokens[0])
        if depth is None:
            return ParsedArgs(tokens[0], default_depth)
        return ParsedArgs(DEFAULT_DIRECTORY, depth)
    if len(tokens) == 2:
        depth = parse_depth(tokens[1])
        if depth is None:
            raise ArgumentParseError(f"invalid max_depth: {tokens[1]!r}")
        return ParsedArgs(tokens[0], depth)
    raise ArgumentParseError(f"expected at most 2 arguments, got {len(tokens)}")


def resolve_path(path: str) -> str:
    """Return an absolute path for ``path``.

    Absolute input is returned untouched. Relative input is resolved against
    the working directory with ``.``, ``..`` and symlinks canonicalized, and
    must exist.
    """
    if os.path.isabs(path):
        return path
    try:
        return str(Path(path).resolve(strict=True))
    except (OSError, RuntimeError) as exc:
        raise PathResolutionError(path, exc) from exc


def _build_parser(prog: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        usage="%(prog)s [directory] [max_depth]",
        description="Print a directory tree with per-type counts.",
        add_help=False,
    )
    parser.add_argument("tokens", nargs="*", metavar="ARG", help="[directory] [max_depth]")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log traversal details to stderr.")
    parser.add_argument("--config", type=Path, default=None, help="Alternate config file.")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Sequence[str] | None = None) -> None:
    """Parse CLI arguments and print the tree for the chosen directory.

    ``argv`` excludes the program name and defaults to ``sys.argv[1:]``.
    Any ``DirTreeError`` ends the run with exit status 1; rows already pushed
    to stdout stay there, the unflushed remainder is dropped.
    """
    if argv is None:
        argv = sys.argv[1:]
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "dirtree"
    if prog == "__main__.py":
        prog = "dirtree"

    if argv and argv[0] in HELP_FLAGS:
        sys.stdout.write(usage_text(prog, load_default_depth(load_config())))
        sys.stdout.flush()
        return

    options = _build_parser(prog).parse_intermixed_args(list(argv))
    _configure_logging(options.verbose)

    config_data = load_config(options.config)
    out = BufferedOutput(passthrough_undecodable(sys.stdout))
    try:
        parsed = parse_args(options.tokens, default_depth=load_default_depth(config_data))
        root = resolve_path(parsed.dir_path)
        logger.debug("listing %s to depth %d", root, parsed.max_depth)
        render_tree(root, parsed.max_depth, out, load_icons(config_data))
        out.flush()
    except DirTreeError as exc:
        out.discard()
        logger.debug("aborted", exc_info=True)
        raise SystemExit(f"{prog}: {exc}") from exc


if __name__ == "__main__":
    main()
