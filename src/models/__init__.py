"""
Models package for docattr

Contains data structures and type definitions for documentation extraction.
"""

from .location import RawPosition, RawLocation, SourcePosition, SourceSpan, Located
from .paths import Identifier
from .comment import (
    Paragraph,
    Heading,
    CodeBlock,
    Verbatim,
    ListBlock,
    Tag,
    Alert,
    InternalTag,
    Docs,
    Stop,
    STOP,
    TagsPolicy,
)
from .annotation import (
    StringLiteral,
    OpaqueExpression,
    RawAnnotation,
    TextPayload,
    DeprecatedPayload,
    AnnotationLike,
    OpenLike,
    Unrecognized,
    OPEN_LIKE,
    UNRECOGNIZED,
    ClassComment,
)

__all__ = [
    "RawPosition",
    "RawLocation",
    "SourcePosition",
    "SourceSpan",
    "Located",
    "Identifier",
    "Paragraph",
    "Heading",
    "CodeBlock",
    "Verbatim",
    "ListBlock",
    "Tag",
    "Alert",
    "InternalTag",
    "Docs",
    "Stop",
    "STOP",
    "TagsPolicy",
    "StringLiteral",
    "OpaqueExpression",
    "RawAnnotation",
    "TextPayload",
    "DeprecatedPayload",
    "AnnotationLike",
    "OpenLike",
    "Unrecognized",
    "OPEN_LIKE",
    "UNRECOGNIZED",
    "ClassComment",
]
