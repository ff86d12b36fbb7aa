from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Iterable

INDENT_WIDTH = 4


@dataclass
class CodeBuilder:
    """
    Ordered, indentation-aware line accumulator.
    Lines are padded when written, so the stored list is already final output.
    """
    indent: str = " " * INDENT_WIDTH
    lines: list[str] = field(default_factory=list)

    def write(self, line: str = "", level: int = 0) -> None:
        # Blank lines carry no trailing whitespace.
        self.lines.append(f"{self.indent * level}{line}" if line else "")

    def extend(self, lines: Iterable[str], level: int = 0) -> None:
        for ln in lines:
            self.write(ln, level)

    def blank(self, n: int = 1) -> None:
        self.lines.extend([""] * n)

    def render(self, newline: str = os.linesep) -> str:
        code = newline.join(self.lines)
        if not code.endswith(newline):
            code += newline
        return code
