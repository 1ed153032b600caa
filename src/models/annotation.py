"""
Annotation and scan item models

Annotations are the metadata items the source parser attaches to
declarations. Scan items are what a caller's classifier reports for each item
of a scope body.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .comment import DocsOrStop
from .location import RawLocation


@dataclass(frozen=True)
class StringLiteral:
    """Plain string constant in an annotation payload"""
    text: str
    location: RawLocation


@dataclass(frozen=True)
class OpaqueExpression:
    """Any other payload item, kept only as source text"""
    source: str
    location: RawLocation


PayloadItem = Union[StringLiteral, OpaqueExpression]


@dataclass(frozen=True)
class RawAnnotation:
    """
    Named metadata item as attached by the source parser

    Attributes:
        name: Annotation name (e.g. "ocaml.doc", "deprecated")
        location: Location of the whole annotation
        payload: Payload items; a documentation comment is exactly one
                 StringLiteral

    Example:
        For the comment "(** Hello *)" the parser attaches:
        RawAnnotation(
            name="ocaml.doc",
            location=<whole comment>,
            payload=(StringLiteral(text=" Hello ", location=<comment>),)
        )
    """
    name: str
    location: RawLocation
    payload: Tuple[PayloadItem, ...] = ()


@dataclass(frozen=True)
class TextPayload:
    """Classified documentation text annotation"""
    text: str
    location: RawLocation


@dataclass(frozen=True)
class DeprecatedPayload:
    """
    Classified deprecation annotation

    Attributes:
        location: Location of the annotation itself (alerts point here)
        message: Literal payload text, None when absent or not a literal
    """
    location: RawLocation
    message: Optional[str] = None


ClassifiedAnnotation = Union[TextPayload, DeprecatedPayload]


@dataclass(frozen=True)
class AnnotationLike:
    """Scope item that is a freestanding annotation"""
    annotation: RawAnnotation


@dataclass(frozen=True)
class OpenLike:
    """Scope item that never carries documentation but does not end the leading section"""


@dataclass(frozen=True)
class Unrecognized:
    """Any other scope item; ends the search for a top comment"""


OPEN_LIKE = OpenLike()
UNRECOGNIZED = Unrecognized()

ItemClass = Union[AnnotationLike, OpenLike, Unrecognized]


@dataclass(frozen=True)
class ClassComment:
    """Already interpreted comment item of a class body"""
    comment: DocsOrStop
