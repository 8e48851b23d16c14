"""Prefix-stack text writer.

A :class:`FancyWriter` wraps an output stream and turns a sequence of write
operations into prefixed lines. Nested scopes (comments, indentation, blocks)
push strings onto a prefix stack; every emitted line starts with the
concatenation of that stack. Named line and block templates, and operations
published by the embedding application, are reached through :meth:`call`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from .caller import CallerContext, as_caller_context
from .errors import UnresolvedOperation
from .interpolation import interpolate
from .templates import BlockConfig, TemplateRegistry
from .types import Body, Program, Sink

logger = logging.getLogger(__name__)


class _Prefix:
    """Holds one slot of the prefix stack for the duration of a ``with``."""

    def __init__(self, writer: FancyWriter, prefix: str) -> None:
        self.writer = writer
        self.prefix = prefix

    def __enter__(self) -> FancyWriter:
        self.writer._prefix_stack.append(self.prefix)
        return self.writer

    def __exit__(self, exc_type, exc, tb) -> None:
        self.writer._prefix_stack.pop()


class _Block:
    """Begin line, indented body, end line. The end line is skipped if the body raises."""

    def __init__(self, writer: FancyWriter, begin: str, end: str, indent: int) -> None:
        self.writer = writer
        self.begin = begin
        self.end = end
        self._scope = _Prefix(writer, " " * indent)

    def __enter__(self) -> FancyWriter:
        self.writer.write(self.begin)
        return self._scope.__enter__()

    def __exit__(self, exc_type, exc, tb) -> None:
        self._scope.__exit__(exc_type, exc, tb)
        if exc_type is None:
            self.writer.write(self.end)


def _check_count(number: int, what: str) -> int:
    if number < 0:
        raise ValueError(f"Number of {what} must be >= 0, got {number}.")
    return number


def _template_args(name: str, args: tuple[Any, ...], kwargs: dict[str, Any]) -> dict[str, Any]:
    if not args:
        return dict(kwargs)
    if len(args) > 1:
        raise TypeError(f"Template '{name}' takes one argument mapping, got {len(args)} positional arguments.")
    first = args[0]
    if not isinstance(first, Mapping):
        raise TypeError(f"Template '{name}' expects a mapping of placeholder values, got {type(first).__name__}.")
    merged = dict(first)
    merged.update(kwargs)
    return merged


class FancyWriter:
    """
    Writes prefixed, line-oriented text to ``stream``.

    Args:
        stream: Sink the lines are appended to (anything with ``write(str)``).
        program: Optional callable run immediately with the writer as argument.
        enum_separator: Separator placed between the items of a collection.
        enum_quote: String placed before and after each item of a collection.
        caller: Operations of the embedding application, either a
            :class:`~fancy_writer.caller.CallerContext` or a mapping of names to
            callables. They take precedence over templates in :meth:`call`.

    Scoped operations accept an optional ``body`` callable. Without one they
    return a context manager::

        w = FancyWriter(out)
        with w.comment("//"):
            w.write("generated, do not edit")
        w.block("config {", "}", body=lambda w: w.write("debug = true"))
    """

    DEFAULT_OPTIONS: Mapping[str, str] = {"enum_separator": ",", "enum_quote": ""}

    # Names answered by the writer itself; consulted first by ``call``.
    BUILTIN_OPERATIONS: frozenset[str] = frozenset({
        "write", "w", "line", "write_enum", "e",
        "prepend", "comment", "c", "indent", "i", "tab_indent", "t", "block",
        "add_line_config", "add_block_config", "interpol", "convert",
    })

    def __init__(
        self,
        stream: Sink,
        program: Program | None = None,
        *,
        enum_separator: str = DEFAULT_OPTIONS["enum_separator"],
        enum_quote: str = DEFAULT_OPTIONS["enum_quote"],
        caller: CallerContext | Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        self._stream = stream
        self._prefix_stack: list[str] = []
        self._enum_separator = enum_separator
        self._enum_quote = enum_quote
        self._caller = as_caller_context(caller)
        self._templates = TemplateRegistry()
        if program is not None:
            self.convert(program)

    # ----------- state ------------

    @property
    def stream(self) -> Sink:
        return self._stream

    @property
    def enum_separator(self) -> str:
        return self._enum_separator

    @property
    def enum_quote(self) -> str:
        return self._enum_quote

    @property
    def caller(self) -> CallerContext | None:
        return self._caller

    @property
    def prefix_stack(self) -> tuple[str, ...]:
        return tuple(self._prefix_stack)

    @property
    def prefix(self) -> str:
        """The string every line written right now starts with."""
        return "".join(self._prefix_stack)

    @property
    def custom_lines(self) -> Mapping[str, str]:
        return self._templates.lines

    @property
    def custom_blocks(self) -> Mapping[str, BlockConfig]:
        return self._templates.blocks

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(depth={len(self._prefix_stack)}, "
            f"lines={sorted(self.custom_lines)}, blocks={sorted(self.custom_blocks)})"
        )

    # ----------- programs ------------

    def convert(self, program: Program) -> FancyWriter:
        """Run ``program`` against this writer; the stream and stack carry over between calls."""
        program(self)
        return self

    # ----------- prefix scopes ------------

    def _scoped(self, scope: _Prefix | _Block, body: Body | None) -> Any:
        if body is None:
            return scope
        with scope as writer:
            return body(writer)

    def prepend(self, prefix: str = " ", body: Body | None = None) -> Any:
        """Prefix every line written inside the scope with ``prefix``."""
        return self._scoped(_Prefix(self, prefix), body)

    def comment(self, marker: str = "#", with_space: bool = True, body: Body | None = None) -> Any:
        """Comment out the scope with ``marker``, followed by a space unless ``with_space`` is false."""
        return self.prepend(f"{marker} " if with_space else marker, body)

    def indent(self, number: int = 2, body: Body | None = None) -> Any:
        return self.prepend(" " * _check_count(number, "spaces"), body)

    def tab_indent(self, number: int = 1, body: Body | None = None) -> Any:
        return self.prepend("\t" * _check_count(number, "tabs"), body)

    def block(self, begin: str, end: str, indent: int = 2, body: Body | None = None) -> Any:
        """Write ``begin``, the scope indented by ``indent`` spaces, then ``end``."""
        return self._scoped(_Block(self, begin, end, _check_count(indent, "spaces")), body)

    # ----------- lines ------------

    def write(self, *values: Any) -> None:
        """
        Write one line per value. Without values, write a single empty line.

        Strings are written as they are, collections are joined with
        ``enum_separator`` (each item wrapped in ``enum_quote``), anything
        else is converted with ``str``.
        """
        for value in values or ("",):
            self._write_line(value)

    def write_enum(self, collection: Iterable[Any]) -> None:
        """Write ``collection`` joined into a single line."""
        self._write_line(collection)

    w = write
    line = write
    c = comment
    i = indent
    t = tab_indent
    e = write_enum

    def _format(self, value: Any) -> str:
        if isinstance(value, str):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return str(value)
        if isinstance(value, Iterable):
            return self._join_enumerable(value)
        return str(value)

    def _join_enumerable(self, items: Iterable[Any]) -> str:
        q = self._enum_quote
        return self._enum_separator.join(f"{q}{item}{q}" for item in items)

    def _write_line(self, value: Any) -> None:
        # Single append per line; a sink never sees a partial line.
        self._stream.write(f"{self.prefix}{self._format(value)}\n")

    # ----------- templates ------------

    @staticmethod
    def interpol(pattern: str, args: Mapping[str, Any] | None = None) -> str:
        return interpolate(pattern, args)

    def add_line_config(self, name: str, pattern: str) -> None:
        """Register (or replace) the line template ``name``; reach it with ``call(name, {...})``."""
        self._templates.add_line(name, pattern)

    def add_block_config(self, name: str, begin: str, end: str, indent: int = 2) -> None:
        """Register (or replace) the block template ``name``."""
        self._templates.add_block(name, begin, end, indent)

    # ----------- dispatch ------------

    def call(self, name: str, /, *args: Any, body: Body | None = None, **kwargs: Any) -> Any:
        """
        Invoke the operation ``name``.

        Resolution stops at the first match:

        1. a built-in operation of the writer (``BUILTIN_OPERATIONS``);
        2. an operation of the caller context, called with the same arguments
           (and ``body=`` if a body was given); its result is returned;
        3. a line template, interpolated with the argument mapping and written;
        4. a block template, whose begin/end lines are interpolated and wrapped
           around ``body``. Without a body the block's context manager is
           returned.

        The argument mapping of a template is the first positional argument
        updated with the keyword arguments, or the keyword arguments alone.
        ``name`` is positional-only, so a ``%name`` placeholder can be passed as
        a keyword. ``body`` is always the scope body; a ``%body`` placeholder
        must be given in the mapping: ``call("html", {"body": "hi"})``.

        Raises:
            UnresolvedOperation: if none of the above answers to ``name``.
        """
        if name in self.BUILTIN_OPERATIONS:
            if body is not None:
                kwargs["body"] = body
            return getattr(self, name)(*args, **kwargs)

        if self._caller is not None:
            fn = self._caller.resolve(name)
            if fn is not None:
                logger.debug("Operation %r handled by caller context.", name)
                if body is not None:
                    return fn(*args, body=body, **kwargs)
                return fn(*args, **kwargs)

        pattern = self._templates.line(name)
        if pattern is not None:
            if body is not None:
                raise TypeError(f"Line template '{name}' does not take a body.")
            logger.debug("Operation %r handled by line template.", name)
            self.write(interpolate(pattern, _template_args(name, args, kwargs)))
            return None

        config = self._templates.block(name)
        if config is not None:
            logger.debug("Operation %r handled by block template.", name)
            begin, end = config.render(_template_args(name, args, kwargs))
            return self.block(begin, end, config.indent, body)

        logger.debug("Operation %r could not be resolved.", name)
        raise UnresolvedOperation(name)
