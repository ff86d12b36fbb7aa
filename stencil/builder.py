from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

"""Class-level assembler.

``ClassBuilder`` owns the file header (namespace, imports), the class
signature (abstract flag, parent, interfaces) and one flat list of body lines.
Doc-comments and methods are rendered the moment they are added and spliced
into that list at the requested indentation, so rendering the file is a pure
walk over accumulated state.
"""

from .codegen import CodeBuilder
from .comment import DocComment
from .literals import LiteralValue, format_constant, format_literal
from .method import MethodBuilder, Visibility
from .naming import to_pascal_case, to_snake_case, upper_first
from .writer import WriteResult, write_if_absent

logger = logging.getLogger(__name__)

OPEN_TAG = "<?php"
FILE_EXTENSION = "php"
NAMESPACE_SEPARATOR = "\\"


def _to_namespace_path(path: str) -> str:
    return path.replace("/", NAMESPACE_SEPARATOR)


@dataclass
class ClassImport:
    name: str
    alias: str | None = None

    @property
    def short_name(self) -> str:
        return self.alias or self.name.rsplit(NAMESPACE_SEPARATOR, 1)[-1]

    def to_code(self) -> str:
        if self.alias:
            return f"use {self.name} as {self.alias};"
        return f"use {self.name};"


class ClassBuilder:
    """Fluent assembler for a single class source file."""

    def __init__(self, name: str) -> None:
        self._file_name = to_pascal_case(name)
        self._class_name = to_pascal_case(name)
        self._namespace: str | None = None
        self._imports: list[ClassImport] = []
        self._abstract = False
        self._parent: str | None = None
        self._interfaces: list[str] = []
        self._body = CodeBuilder()
        self._indentation = 0

    # ---------- accessors ----------

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def class_name(self) -> str:
        return self._class_name

    @property
    def namespace(self) -> str | None:
        return self._namespace

    @property
    def parent(self) -> str | None:
        return self._parent

    @property
    def imports(self) -> list[ClassImport]:
        return list(self._imports)

    @property
    def interfaces(self) -> list[str]:
        return list(self._interfaces)

    @property
    def is_abstract(self) -> bool:
        return self._abstract

    @property
    def body_lines(self) -> list[str]:
        return list(self._body.lines)

    # ---------- header ----------

    def set_indentation(self, n: int) -> "ClassBuilder":
        self._indentation = n
        return self

    def set_namespace(self, path: str) -> "ClassBuilder":
        self._namespace = _to_namespace_path(path)
        return self

    def set_abstract(self) -> "ClassBuilder":
        self._abstract = True
        return self

    def set_class_name(self, name: str) -> "ClassBuilder":
        self._class_name = to_pascal_case(name)
        return self

    def set_parent(self, name: str) -> "ClassBuilder":
        self._parent = _to_namespace_path(upper_first(name))
        return self

    def add_import(self, name: str, alias: str | None = None) -> "ClassBuilder":
        self._imports.append(ClassImport(upper_first(name), upper_first(alias) if alias else None))
        return self

    def implement(self, interfaces: str | Sequence[str]) -> "ClassBuilder":
        # Only the single-name form is case-normalized; lists go in verbatim.
        if isinstance(interfaces, str):
            self._interfaces.append(upper_first(interfaces))
        elif isinstance(interfaces, (list, tuple)):
            self._interfaces.extend(interfaces)
        else:
            logger.debug("Ignoring interfaces %r for class %s", interfaces, self._class_name)
        return self

    # ---------- body ----------

    def _level(self, indent: int | None) -> int:
        return self._indentation if indent is None else indent

    def add_raw_line(self, text: str, indent: int | None = None) -> "ClassBuilder":
        self._body.write(text, self._level(indent))
        return self

    def add_blank_lines(self, n: int = 1) -> "ClassBuilder":
        self._body.blank(n)
        return self

    def add_line_comment(self, text: str, indent: int | None = None) -> "ClassBuilder":
        return self.add_raw_line(f"// {upper_first(text)}", indent)

    def add_constant(self, name: str, value: LiteralValue, indent: int | None = None) -> "ClassBuilder":
        const = to_snake_case(name).upper()
        return self.add_raw_line(f"const {const} = {format_constant(value)};", indent)

    def add_variable(
        self,
        name: str,
        visibility: str | Visibility,
        value: LiteralValue = None,
        is_static: bool = False,
        indent: int | None = None,
    ) -> "ClassBuilder":
        parsed = Visibility.parse(visibility)
        if parsed is None:
            logger.debug("Ignoring property %s with unknown visibility %r", name, visibility)
            return self
        line = parsed.value
        if is_static:
            line += " static"
        line += f" ${to_snake_case(name)}"
        default = format_literal(value)
        if default is not None:
            line += f" = {default}"
        return self.add_raw_line(line + ";", indent)

    def add_public_variable(
        self, name: str, value: LiteralValue = None, is_static: bool = False, indent: int | None = None
    ) -> "ClassBuilder":
        return self.add_variable(name, Visibility.PUBLIC, value, is_static, indent)

    def add_public_static_variable(self, name: str, value: LiteralValue = None, indent: int | None = None) -> "ClassBuilder":
        return self.add_public_variable(name, value, True, indent)

    def add_null_public_variable(self, name: str, is_static: bool = False, indent: int | None = None) -> "ClassBuilder":
        return self.add_public_variable(name, None, is_static, indent)

    def add_private_variable(
        self, name: str, value: LiteralValue = None, is_static: bool = False, indent: int | None = None
    ) -> "ClassBuilder":
        return self.add_variable(name, Visibility.PRIVATE, value, is_static, indent)

    def add_private_static_variable(self, name: str, value: LiteralValue = None, indent: int | None = None) -> "ClassBuilder":
        return self.add_private_variable(name, value, True, indent)

    def add_null_private_variable(self, name: str, is_static: bool = False, indent: int | None = None) -> "ClassBuilder":
        return self.add_private_variable(name, None, is_static, indent)

    def add_protected_variable(
        self, name: str, value: LiteralValue = None, is_static: bool = False, indent: int | None = None
    ) -> "ClassBuilder":
        return self.add_variable(name, Visibility.PROTECTED, value, is_static, indent)

    def add_protected_static_variable(self, name: str, value: LiteralValue = None, indent: int | None = None) -> "ClassBuilder":
        return self.add_protected_variable(name, value, True, indent)

    def add_null_protected_variable(self, name: str, is_static: bool = False, indent: int | None = None) -> "ClassBuilder":
        return self.add_protected_variable(name, None, is_static, indent)

    def add_method(self, method: MethodBuilder, indent: int | None = None) -> "ClassBuilder":
        self._body.extend(method.render(), self._level(indent))
        return self

    def add_comment(self, comment: DocComment, indent: int | None = None) -> "ClassBuilder":
        self._body.extend(comment.render(), self._level(indent))
        return self

    # ---------- rendering ----------

    def _rendered_parent(self) -> str | None:
        parent = self._parent
        if parent is None or not self._namespace or NAMESPACE_SEPARATOR in parent:
            return parent
        if any(imp.short_name == parent for imp in self._imports):
            return parent
        return f"{self._namespace}{NAMESPACE_SEPARATOR}{parent}"

    def signature(self) -> str:
        head = "abstract class " if self._abstract else "class "
        head += self._class_name
        parent = self._rendered_parent()
        if parent:
            head += f" extends {parent}"
        if self._interfaces:
            head += f" implements {', '.join(self._interfaces)}"
        return head

    def render(self, newline: str = os.linesep) -> str:
        cb = CodeBuilder()
        cb.write(OPEN_TAG)
        cb.blank()
        if self._namespace:
            cb.write(f"namespace {self._namespace};")
            cb.blank()
        if self._imports:
            for imp in self._imports:
                cb.write(imp.to_code())
            cb.blank()
        cb.write(self.signature())
        cb.write("{")
        cb.extend(self._body.lines)
        cb.write("}")
        return cb.render(newline)

    def output_path(self, directory: str | Path) -> Path:
        return Path(directory) / f"{self._file_name}.{FILE_EXTENSION}"

    def write(self, directory: str | Path) -> WriteResult:
        """
        Render into ``<directory>/<FileName>.php`` unless that file exists.

        ``directory`` is joined as a path, not concatenated, so a trailing
        separator is optional and a filename prefix is not supported.
        """
        return write_if_absent(self.output_path(directory), self.render())
