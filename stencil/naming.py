"""Identifier case conversion used for class, file, method and member names."""

from __future__ import annotations

import re

_ACRONYM_BOUNDARY = re.compile(r"(.)([A-Z][a-z]+)")
_WORD_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_SEPARATORS = re.compile(r"[\W_]+")


def _split_prefix(value: str) -> tuple[str, str]:
    # Leading underscores carry meaning (``__construct``, ``_private``).
    stripped = value.lstrip("_")
    return value[: len(value) - len(stripped)], stripped


def _words(value: str) -> list[str]:
    s1 = _ACRONYM_BOUNDARY.sub(r"\1_\2", value)
    s2 = _WORD_BOUNDARY.sub(r"\1_\2", s1)
    return [w for w in _SEPARATORS.split(s2.lower()) if w]


def upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def to_snake_case(value: str) -> str:
    """Convert ``SomeThing``, ``someThing`` or ``some-thing`` to ``some_thing``."""
    prefix, rest = _split_prefix(value)
    return prefix + "_".join(_words(rest))


def to_pascal_case(value: str) -> str:
    """Convert ``some_thing`` or ``someThing`` to ``SomeThing``."""
    prefix, rest = _split_prefix(value)
    return prefix + "".join(upper_first(w) for w in _words(rest))


def to_camel_case(value: str) -> str:
    """Convert ``some_thing`` or ``SomeThing`` to ``someThing``."""
    prefix, rest = _split_prefix(value)
    words = _words(rest)
    if not words:
        return prefix
    return prefix + words[0] + "".join(upper_first(w) for w in words[1:])
