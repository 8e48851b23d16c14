from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .writer import FancyWriter


@runtime_checkable
class Sink(Protocol):
    """Anything text can be appended to: ``io.StringIO``, ``sys.stdout``, open files."""

    def write(self, text: str, /) -> Any: ...


# A program (or nested body) is a plain callable that receives the writer.
Program = Callable[["FancyWriter"], Any]
Body = Program

# Placeholder name -> renderable value.
TemplateArgs = Mapping[str, Any]
