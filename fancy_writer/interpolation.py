from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

# ``%%`` is matched first so an escaped percent never starts a placeholder.
_PLACEHOLDER = re.compile(r"%%|%(\w+)")


def interpolate(pattern: str, args: Mapping[str, Any] | None = None) -> str:
    """
    Fill ``%identifier`` placeholders in ``pattern`` from ``args``.

    Identifiers are maximal runs of word characters. A missing key renders
    as the empty string. Once all placeholders are substituted, every
    remaining ``%%`` collapses to a single ``%``.

    >>> interpolate("The %%speed %color fox", {"speed": "quick", "color": "brown"})
    'The %speed brown fox'
    """
    values: Mapping[str, Any] = args or {}

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name is None:
            return match.group(0)
        if name in values:
            return str(values[name])
        return ""

    return _PLACEHOLDER.sub(_substitute, pattern).replace("%%", "%")
