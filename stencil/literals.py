from __future__ import annotations

import json
import math
from typing import Any, Mapping, Sequence, Union

"""Literal formatting shared by constants, properties and parameter defaults.

A default value is either absent (``None``) or one of the scalar/array shapes
below. Every component that renders a default goes through
:func:`format_literal` so the rules cannot drift apart.
"""

LiteralValue = Union[bool, int, float, str, Sequence[Any], Mapping[str, Any], None]


def quote_string(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_literal(value: LiteralValue) -> str | None:
    """Render ``value`` as source text, or ``None`` when the value is absent."""
    if value is None:
        return None
    # bool is an int subclass; test it first.
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, str):
        return quote_string(value)
    if isinstance(value, (list, tuple, dict)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NAN"
        return "INF" if value > 0 else "-INF"
    return str(value)


def format_constant(value: LiteralValue) -> str:
    rendered = format_literal(value)
    return "null" if rendered is None else rendered
