from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Sequence

from .codegen import CodeBuilder
from .literals import LiteralValue, format_literal
from .naming import to_camel_case, to_snake_case

logger = logging.getLogger(__name__)

CONSTRUCTOR_NAME = "__construct"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    PROTECTED = "protected"

    @classmethod
    def parse(cls, value: "str | Visibility") -> "Visibility | None":
        """Case-insensitive lookup; ``None`` for anything unrecognized."""
        if isinstance(value, Visibility):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return None


@dataclass
class MethodParameter:
    name: str
    default_value: LiteralValue = None
    data_type: str | None = None

    def as_sig(self) -> str:
        s = f"${self.name}"
        if self.data_type:
            s = f"{self.data_type} {s}"
        default = format_literal(self.default_value)
        if default is not None:
            s += f" = {default}"
        return s


@dataclass
class MethodBuilder:
    """One class member function: signature plus an optional body block."""
    name: str
    is_static: bool = False
    is_abstract: bool = False
    visibility: Visibility = Visibility.PUBLIC
    parameters: dict[str, MethodParameter] = field(default_factory=dict)
    body: CodeBuilder = field(default_factory=CodeBuilder)
    indentation: int = 0

    def set_indentation(self, n: int) -> "MethodBuilder":
        self.indentation = n
        return self

    def set_static(self) -> "MethodBuilder":
        self.is_static = True
        return self

    def set_abstract(self) -> "MethodBuilder":
        self.is_abstract = True
        return self

    def set_visibility(self, visibility: "str | Visibility") -> "MethodBuilder":
        parsed = Visibility.parse(visibility)
        if parsed is None:
            logger.debug("Ignoring unknown visibility %r for method %s", visibility, self.name)
            return self
        self.visibility = parsed
        return self

    def set_public(self) -> "MethodBuilder":
        return self.set_visibility(Visibility.PUBLIC)

    def set_private(self) -> "MethodBuilder":
        return self.set_visibility(Visibility.PRIVATE)

    def set_protected(self) -> "MethodBuilder":
        return self.set_visibility(Visibility.PROTECTED)

    # ---------- parameters ----------

    def add_param(self, name: str, default: LiteralValue = None, data_type: str | None = None) -> "MethodBuilder":
        key = to_snake_case(name)
        # Re-adding a name keeps its original slot; the latest call wins.
        self.parameters[key] = MethodParameter(key, default, data_type)
        return self

    def add_mixed_param(self, name: str, default: Any = None) -> "MethodBuilder":
        return self.add_param(name, default, "mixed")

    def add_string_param(self, name: str, default: str | None = None) -> "MethodBuilder":
        return self.add_param(name, default, "string")

    def add_integer_param(self, name: str, default: int | None = None) -> "MethodBuilder":
        return self.add_param(name, default, "int")

    def add_bool_param(self, name: str, default: bool | None = None) -> "MethodBuilder":
        return self.add_param(name, default, "bool")

    def add_array_param(self, name: str, default: Sequence[Any] | dict[str, Any] | None = None) -> "MethodBuilder":
        return self.add_param(name, default, "array")

    def add_float_param(self, name: str, default: float | None = None) -> "MethodBuilder":
        return self.add_param(name, default, "float")

    # ---------- body ----------

    def add_raw_line(self, text: str, indent: int | None = None) -> "MethodBuilder":
        self.body.write(text, self.indentation if indent is None else indent)
        return self

    # ---------- rendering ----------

    def signature(self) -> str:
        head = f"{self.visibility.value} "
        if self.is_abstract:
            head += "abstract "
        if self.is_static:
            head += "static "
        params = ", ".join(p.as_sig() for p in self.parameters.values())
        return f"{head}function {to_camel_case(self.name)}({params})"

    def render(self) -> list[str]:
        if self.is_abstract:
            return [self.signature() + ";"]
        return [self.signature(), "{", *self.body.lines, "}"]

    # ---------- named constructors ----------

    @classmethod
    def make_public(cls, name: str) -> "MethodBuilder":
        return cls(name).set_public()

    @classmethod
    def make_public_static(cls, name: str) -> "MethodBuilder":
        return cls.make_public(name).set_static()

    @classmethod
    def make_private(cls, name: str) -> "MethodBuilder":
        return cls(name).set_private()

    @classmethod
    def make_private_static(cls, name: str) -> "MethodBuilder":
        return cls.make_private(name).set_static()

    @classmethod
    def make_protected(cls, name: str) -> "MethodBuilder":
        return cls(name).set_protected()

    @classmethod
    def make_protected_static(cls, name: str) -> "MethodBuilder":
        return cls.make_protected(name).set_static()

    @classmethod
    def make_constructor(cls) -> "MethodBuilder":
        return cls.make_public_constructor()

    @classmethod
    def make_public_constructor(cls) -> "MethodBuilder":
        return cls.make_public(CONSTRUCTOR_NAME)

    @classmethod
    def make_private_constructor(cls) -> "MethodBuilder":
        return cls.make_private(CONSTRUCTOR_NAME)
