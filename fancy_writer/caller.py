from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CallerContext(Protocol):
    """
    Capability interface of the object that embeds a writer.

    The writer asks the context for an operation by name before falling back
    to its templates. Returning ``None`` means the context does not provide
    the operation.
    """

    def resolve(self, name: str) -> Callable[..., Any] | None: ...


class CallerOperations:
    """A :class:`CallerContext` backed by an explicit name -> callable table."""

    def __init__(self, operations: Mapping[str, Callable[..., Any]] | None = None) -> None:
        self._operations: dict[str, Callable[..., Any]] = dict(operations or {})
        for name, fn in self._operations.items():
            if not callable(fn):
                raise TypeError(f"Caller operation '{name}' is not callable.")

    def resolve(self, name: str) -> Callable[..., Any] | None:
        return self._operations.get(name)

    def names(self) -> frozenset[str]:
        return frozenset(self._operations)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({sorted(self._operations)})"


def expose(obj: object, *names: str) -> CallerOperations:
    """Publish the listed methods of ``obj`` as caller operations."""

    operations: dict[str, Callable[..., Any]] = {}
    for name in names:
        fn = getattr(obj, name, None)
        if not callable(fn):
            raise TypeError(f"{type(obj).__name__} has no callable '{name}' to expose.")
        operations[name] = fn
    return CallerOperations(operations)


def as_caller_context(
    caller: CallerContext | Mapping[str, Callable[..., Any]] | None,
) -> CallerContext | None:
    if caller is None or isinstance(caller, CallerContext):
        return caller
    if isinstance(caller, Mapping):
        return CallerOperations(caller)
    raise TypeError(
        "caller must implement resolve(name) or be a mapping of operation names to callables; "
        f"got {type(caller).__name__}. Use expose(obj, 'method', ...) to publish methods."
    )
