"""
Source location models

Positions come in two shapes: the raw lexer position attached by the source
parser (absolute offsets) and the point/span form used in documentation output
(line and column).
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class RawPosition:
    """
    Lexer position as produced by the source parser

    Attributes:
        file: Source file name
        line: 1-based line number
        line_start: Absolute offset of the first character of the line
        offset: Absolute offset of the position

    Example:
        The 'x' in "let x" on line 3, where line 3 starts at offset 40:
        RawPosition(file="m.ml", line=3, line_start=40, offset=44)
    """
    file: str
    line: int
    line_start: int
    offset: int


@dataclass(frozen=True)
class RawLocation:
    """Start and end lexer positions of a source construct"""
    start: RawPosition
    end: RawPosition


@dataclass(frozen=True)
class SourcePosition:
    """Line and column (offset from the start of the line)"""
    line: int
    column: int


@dataclass(frozen=True)
class SourceSpan:
    """File-qualified span between two points"""
    file: str
    start: SourcePosition
    end: SourcePosition


@dataclass(frozen=True)
class Located(Generic[T]):
    """
    A value paired with the span it was read from

    Every documentation element and alert is carried as Located so that
    diagnostics and renderers can point back at the source.
    """
    span: SourceSpan
    value: T
