"""
Position and span mapping

Converts raw lexer positions into the (line, column) points carried by
documentation elements, and locates offsets inside a comment's text.
"""

from dataclasses import replace

from ..config import appsettings
from ..models.location import RawPosition, RawLocation, SourcePosition, SourceSpan


def point_ofPosition(position: RawPosition) -> SourcePosition:
    """Line/column point of a raw lexer position"""
    return SourcePosition(line=position.line, column=position.offset - position.line_start)


def location_read(location: RawLocation) -> SourceSpan:
    """
    File-qualified span of a raw lexer location

    Example:
        >>> start = RawPosition("m.ml", 3, 40, 44)
        >>> end = RawPosition("m.ml", 3, 40, 52)
        >>> location_read(RawLocation(start, end)).start
        SourcePosition(line=3, column=4)
    """
    return SourceSpan(
        file=location.start.file,
        start=point_ofPosition(location.start),
        end=point_ofPosition(location.end),
    )


def location_pad(location: RawLocation) -> RawPosition:
    """
    Position of the first character of comment text inside an annotation literal

    The literal's location covers the comment delimiters; the text proper
    starts appsettings.location_pad characters later (after "(**").
    """
    start = location.start
    return replace(start, offset=start.offset + appsettings.location_pad)


def point_advance(origin: RawPosition, text: str, index: int) -> SourcePosition:
    """
    Point of text[index], given that text[0] sits at origin

    Args:
        origin: Position of the first character of text
        text: Comment text
        index: Offset into text (may equal len(text))

    Returns:
        SourcePosition of that offset in the source file
    """
    newlines = text.count('\n', 0, index)
    if newlines == 0:
        return SourcePosition(line=origin.line, column=origin.offset - origin.line_start + index)
    line_begin = text.rindex('\n', 0, index) + 1
    return SourcePosition(line=origin.line + newlines, column=index - line_begin)


def span_ofText(origin: RawPosition, text: str, begin: int, end: int) -> SourceSpan:
    """Span of text[begin:end], given that text[0] sits at origin"""
    return SourceSpan(
        file=origin.file,
        start=point_advance(origin, text, begin),
        end=point_advance(origin, text, end),
    )
