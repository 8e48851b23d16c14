from __future__ import annotations


class FancyWriterError(Exception):
    """Base class for errors raised by the writer."""


class UnresolvedOperation(FancyWriterError, LookupError):
    """No built-in, caller operation or template answers to ``name``."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unresolved operation '{name}': not a built-in, not provided by the "
            f"caller context and no line or block template is registered under it."
        )
        self.name = name
