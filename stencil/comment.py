"""Doc-comment blocks for properties and methods."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .naming import to_snake_case


class CommentKind(str, Enum):
    FIELD = "var"
    METHOD = "method"


@dataclass
class DocParameter:
    data_type: str
    description: str = ""


@dataclass
class DocComment:
    """
    A ``/** ... */`` block. Field blocks end with ``@var``; method blocks list
    ``@param`` lines in insertion order followed by one ``@return`` line.
    """
    kind: CommentKind
    field_type: str = "mixed"
    description: str = ""
    parameters: dict[str, DocParameter] = field(default_factory=dict)
    return_type: str = "void"

    @property
    def is_field(self) -> bool:
        return self.kind is CommentKind.FIELD

    @property
    def is_method(self) -> bool:
        return self.kind is CommentKind.METHOD

    def set_description(self, description: str | None) -> "DocComment":
        self.description = (description or "").strip()
        return self

    def set_field_type(self, field_type: str) -> "DocComment":
        self.field_type = field_type
        return self

    # ---------- parameters ----------

    def add_parameter(self, name: str, data_type: str, description: str | None = None) -> "DocComment":
        self.parameters[to_snake_case(name)] = DocParameter(data_type, (description or "").strip())
        return self

    def add_mixed_parameter(self, name: str, description: str | None = None) -> "DocComment":
        return self.add_parameter(name, "mixed", description)

    def add_string_parameter(self, name: str, description: str | None = None) -> "DocComment":
        return self.add_parameter(name, "string", description)

    def add_integer_parameter(self, name: str, description: str | None = None) -> "DocComment":
        return self.add_parameter(name, "int", description)

    def add_bool_parameter(self, name: str, description: str | None = None) -> "DocComment":
        return self.add_parameter(name, "bool", description)

    def add_array_parameter(self, name: str, description: str | None = None) -> "DocComment":
        return self.add_parameter(name, "array", description)

    def add_float_parameter(self, name: str, description: str | None = None) -> "DocComment":
        return self.add_parameter(name, "float", description)

    # ---------- return type ----------

    def set_return_type(self, return_type: str) -> "DocComment":
        self.return_type = return_type
        return self

    def return_void(self) -> "DocComment":
        return self.set_return_type("void")

    def return_mixed(self) -> "DocComment":
        return self.set_return_type("mixed")

    def return_string(self) -> "DocComment":
        return self.set_return_type("string")

    def return_int(self) -> "DocComment":
        return self.set_return_type("int")

    def return_bool(self) -> "DocComment":
        return self.set_return_type("bool")

    def return_array(self) -> "DocComment":
        return self.set_return_type("array")

    def return_float(self) -> "DocComment":
        return self.set_return_type("float")

    # ---------- rendering ----------

    def render(self) -> list[str]:
        lines = ["/**", f" * {self.description}".rstrip(), " *"]
        if self.is_method:
            for name, param in self.parameters.items():
                lines.append(f" * @param {param.data_type} ${name} {param.description}".rstrip())
            lines.append(f" * @return {self.return_type}")
        else:
            lines.append(f" * @var {self.field_type}")
        lines.append(" */")
        return lines

    # ---------- named constructors ----------

    @classmethod
    def for_field(cls, field_type: str, description: str | None = None) -> "DocComment":
        return cls(CommentKind.FIELD).set_field_type(field_type).set_description(description)

    @classmethod
    def for_method(cls, description: str | None = None) -> "DocComment":
        return cls(CommentKind.METHOD).set_description(description)

    @classmethod
    def for_mixed_field(cls, description: str | None = None) -> "DocComment":
        return cls.for_field("mixed", description)

    @classmethod
    def for_string_field(cls, description: str | None = None) -> "DocComment":
        return cls.for_field("string", description)

    @classmethod
    def for_int_field(cls, description: str | None = None) -> "DocComment":
        return cls.for_field("int", description)

    @classmethod
    def for_bool_field(cls, description: str | None = None) -> "DocComment":
        return cls.for_field("bool", description)

    @classmethod
    def for_array_field(cls, description: str | None = None) -> "DocComment":
        return cls.for_field("array", description)

    @classmethod
    def for_float_field(cls, description: str | None = None) -> "DocComment":
        return cls.for_field("float", description)
