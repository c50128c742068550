"""Errors raised while compiling a binding layout."""

from __future__ import annotations
from typing import Optional

from lark.exceptions import (
    UnexpectedInput, UnexpectedCharacters, UnexpectedToken, UnexpectedEOF,
)

from bindc.parser.ast_nodes import SourceLocation


def _format_with_location(
    message: str,
    line: Optional[int],
    column: Optional[int],
    source_name: str = "",
) -> str:
    if line is None:
        return f"{source_name}: {message}" if source_name else message
    where = f"line {line}, column {column}"
    if source_name:
        where = f"{source_name}, {where}"
    return f"{message}\nLocation: {where}"


def _end_of_source(source: str) -> tuple[int, int]:
    """1-based line and column just past the last character."""
    line = source.count("\n") + 1
    column = len(source) - source.rfind("\n")
    return line, column


class LayoutError(Exception):
    """Base error."""


class LayoutSyntaxError(LayoutError):
    """Raised when layout source does not match the grammar."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        source_name: str = "",
    ):
        self.line = line
        self.column = column
        self.source_name = source_name
        super().__init__(_format_with_location(message, line, column, source_name))

    @classmethod
    def from_lark(
        cls, exc: UnexpectedInput, source: str, source_name: str = ""
    ) -> LayoutSyntaxError:
        if isinstance(exc, UnexpectedEOF):
            line, column = _end_of_source(source)
            return cls("Unexpected end of input", line, column, source_name)

        if isinstance(exc, UnexpectedCharacters):
            message = f"Unexpected input {exc.char!r}"
        elif isinstance(exc, UnexpectedToken):
            message = f"Unexpected token {str(exc.token)!r}"
        else:
            message = "Invalid layout"
        context = exc.get_context(source).rstrip()
        if context:
            message = f"{message}\n{context}"
        return cls(message, exc.line, exc.column, source_name)


class LayoutResolveError(LayoutError):
    """Raised when a parsed layout has no resolution rule."""

    def __init__(
        self,
        message: str,
        loc: Optional[SourceLocation] = None,
        source_name: str = "",
    ):
        self.message = message
        self.loc = loc
        self.source_name = source_name
        line, column = (loc.line, loc.column) if loc is not None else (None, None)
        super().__init__(_format_with_location(message, line, column, source_name))

    def with_source(self, source_name: str) -> LayoutResolveError:
        return LayoutResolveError(self.message, self.loc, source_name)
