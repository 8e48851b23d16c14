import argparse
import logging
import sys
from contextlib import ExitStack

from .writer import FancyWriter

logger = logging.getLogger(__name__)


def _parse_assignments(parser: argparse.ArgumentParser, pairs: list[str]) -> dict[str, str]:
    values: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            parser.error(f"expected key=value, got {pair!r}")
        values[key] = value
    return values


def cmd_interpol(args: argparse.Namespace) -> None:
    values = _parse_assignments(args.parser, args.values)
    FancyWriter(sys.stdout).write(FancyWriter.interpol(args.pattern, values))


def cmd_enum(args: argparse.Namespace) -> None:
    writer = FancyWriter(sys.stdout, enum_separator=args.separator, enum_quote=args.quote)
    writer.write_enum(args.values)


def cmd_line(args: argparse.Namespace) -> None:
    writer = FancyWriter(sys.stdout)
    with ExitStack() as scopes:
        if args.comment is not None:
            scopes.enter_context(writer.comment(args.comment, not args.no_space))
        if args.indent:
            scopes.enter_context(writer.indent(args.indent))
        writer.write(*args.text)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser("fancy-writer")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Log to stderr (-vv for debug)")
    sub = p.add_subparsers(required=True)

    s = sub.add_parser("interpol", help="Fill %%placeholders in a pattern and print the line")
    s.add_argument("pattern", help="Pattern such as 'LoadModule %%module modules/%%file.so'")
    s.add_argument("values", nargs="*", metavar="key=value", help="Placeholder values")
    s.set_defaults(func=cmd_interpol, parser=s)

    s = sub.add_parser("enum", help="Print values joined into one line")
    s.add_argument("values", nargs="+")
    s.add_argument("--separator", default=FancyWriter.DEFAULT_OPTIONS["enum_separator"])
    s.add_argument("--quote", default=FancyWriter.DEFAULT_OPTIONS["enum_quote"])
    s.set_defaults(func=cmd_enum)

    s = sub.add_parser("line", help="Print lines, optionally commented out and indented")
    s.add_argument("text", nargs="*", help="Lines to print; none prints an empty line")
    s.add_argument("--indent", type=int, default=0, help="Spaces to indent by")
    s.add_argument("--comment", help="Comment marker, e.g. '#' or '//'")
    s.add_argument("--no-space", action="store_true", help="No space after the comment marker")
    s.set_defaults(func=cmd_line)

    return p


def _configure_logging(verbosity: int) -> None:
    if verbosity <= 0:
        return
    level = logging.INFO if verbosity == 1 else logging.DEBUG
    logging.basicConfig(level=level, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    logger.debug("Running %s", args.func.__name__)
    args.func(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
