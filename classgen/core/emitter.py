"""
Indentation-aware line emitter used by the generators.

Lines are collected in memory and joined once at the end. Indentation is
tracked as a depth counter that only :meth:`CodeEmitter.block` changes, so
braces always balance and the depth is restored on every exit path.
"""

import os
from contextlib import contextmanager
from typing import Iterator, List, Optional

OPEN_BLOCK = "{"
CLOSE_BLOCK = "}"


class CodeEmitter:
    """Collects indented lines of brace-delimited source code."""

    def __init__(
        self, indent: str = "\t", line_ending: str = os.linesep, depth: int = 0
    ):
        """
        Initialize emitter.

        Args:
            indent: Text written once per indentation level
            line_ending: Terminator appended to every line
            depth: Starting indentation depth
        """
        if depth < 0:
            raise ValueError(f"Indentation depth cannot be negative: {depth}")

        self.indent = indent
        self.line_ending = line_ending
        self.starting_depth = depth
        self._depth = depth
        self._lines: List[str] = []

    @property
    def depth(self) -> int:
        """Current indentation depth."""
        return self._depth

    @property
    def lines(self) -> List[str]:
        """Emitted lines without terminators."""
        return list(self._lines)

    def emit_line(self, text: str = "", depth: Optional[int] = None) -> None:
        """
        Append one line at the given depth.

        Args:
            text: Line content, written verbatim after the indentation
            depth: Indentation depth, defaults to the current depth
        """
        if depth is None:
            depth = self._depth
        self._lines.append(f"{self.indent * depth}{text}")

    def emit_blank_line(self) -> None:
        """Append an empty line; blank lines carry no indentation."""
        self._lines.append("")

    def emit_lines(self, lines: List[str], depth: Optional[int] = None) -> None:
        """Append several lines at the same depth."""
        for line in lines:
            self.emit_line(line, depth)

    @contextmanager
    def block(self) -> Iterator["CodeEmitter"]:
        """
        Emit a brace-delimited block.

        The opening brace is written at the current depth, the body runs one
        level deeper and the closing brace is written back at the original
        depth, even when the body raises.

        Usage:
            with emitter.block():
                emitter.emit_line("return 1;")
        """
        outer_depth = self._depth
        self.emit_line(OPEN_BLOCK, outer_depth)
        self._depth = outer_depth + 1
        try:
            yield self
        finally:
            self._depth = outer_depth
            self.emit_line(CLOSE_BLOCK, outer_depth)

    def render(self) -> str:
        """Join all lines, terminating each with the configured line ending."""
        return "".join(f"{line}{self.line_ending}" for line in self._lines)
