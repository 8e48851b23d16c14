from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, NamedTuple

from .interpolation import interpolate

logger = logging.getLogger(__name__)


class BlockConfig(NamedTuple):
    """Begin/end patterns of a block template and the indent of its body."""

    begin: str
    end: str
    indent: int = 2

    def render(self, args: Mapping[str, Any] | None = None) -> tuple[str, str]:
        return interpolate(self.begin, args), interpolate(self.end, args)


def _check_name(name: str) -> str:
    if not name:
        raise ValueError("Template name must be a non-empty string.")
    return name


class TemplateRegistry:
    """
    Named line and block templates.

    Registration overwrites silently; there is no removal. Lookups return
    ``None`` for unknown names so the caller decides how to fail.
    """

    def __init__(self) -> None:
        self._lines: dict[str, str] = {}
        self._blocks: dict[str, BlockConfig] = {}

    @property
    def lines(self) -> Mapping[str, str]:
        return MappingProxyType(self._lines)

    @property
    def blocks(self) -> Mapping[str, BlockConfig]:
        return MappingProxyType(self._blocks)

    def add_line(self, name: str, pattern: str) -> None:
        _check_name(name)
        if name in self._lines:
            logger.debug("Overwriting line template %r.", name)
        self._lines[name] = pattern
        logger.debug("Registered line template %r: %r", name, pattern)

    def add_block(self, name: str, begin: str, end: str, indent: int = 2) -> None:
        _check_name(name)
        if indent < 0:
            raise ValueError(f"Block indent must be >= 0, got {indent}.")
        if name in self._blocks:
            logger.debug("Overwriting block template %r.", name)
        self._blocks[name] = BlockConfig(begin, end, indent)
        logger.debug("Registered block template %r: %r ... %r (indent %d)", name, begin, end, indent)

    def line(self, name: str) -> str | None:
        return self._lines.get(name)

    def block(self, name: str) -> BlockConfig | None:
        return self._blocks.get(name)

    def render_line(self, name: str, args: Mapping[str, Any] | None = None) -> str:
        """Interpolate the line template ``name``; raises ``KeyError`` if unknown."""
        return interpolate(self._lines[name], args)
