"""
Shared builders for annotation and scope item fixtures
"""

import pytest

from docattr.models import (
    AnnotationLike,
    Identifier,
    OPEN_LIKE,
    OpaqueExpression,
    RawAnnotation,
    RawLocation,
    RawPosition,
    StringLiteral,
    UNRECOGNIZED,
)

FILE = "scope.ml"


def raw_location(line: int, start: int, end: int, line_start: int = 0) -> RawLocation:
    """Location on one line, start/end given as columns"""
    return RawLocation(
        RawPosition(FILE, line, line_start, line_start + start),
        RawPosition(FILE, line, line_start, line_start + end),
    )


def doc(text: str, line: int = 1, column: int = 0, name: str = "ocaml.doc") -> RawAnnotation:
    """Attached doc comment '(**text*)' starting at line/column"""
    location = raw_location(line, column, column + len(text) + 5)
    return RawAnnotation(name, location, (StringLiteral(text, location),))


def text(body: str, line: int = 1, column: int = 0, name: str = "ocaml.text") -> RawAnnotation:
    """Floating doc comment '(**body*)' starting at line/column"""
    return doc(body, line, column, name)


def deprecated(message=None, line: int = 1, column: int = 0, name: str = "ocaml.deprecated") -> RawAnnotation:
    """[@@deprecated "message"] starting at line/column"""
    location = raw_location(line, column, column + 20)
    payload = () if message is None else (StringLiteral(message, raw_location(line, column + 15, column + 18)),)
    return RawAnnotation(name, location, payload)


def other(name: str = "inline", line: int = 1) -> RawAnnotation:
    location = raw_location(line, 0, 10)
    return RawAnnotation(name, location, (OpaqueExpression("always", location),))


class Item:
    """Scope body item as a caller would hold it"""

    def __init__(self, label, annotation=None, kind="annotation"):
        self.label = label
        self.annotation = annotation
        self.kind = kind

    def __repr__(self) -> str:
        return f"Item({self.label!r})"


def classify(item: Item):
    """Classifier in the shape extract_top_comment expects"""
    if item.kind == "annotation":
        return AnnotationLike(item.annotation)
    if item.kind == "open":
        return OPEN_LIKE
    return UNRECOGNIZED


@pytest.fixture
def parent() -> Identifier:
    return Identifier("module", "Scope", Identifier("root", "Lib"))
