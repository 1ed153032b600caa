"""
Documentation carried by annotations

Classifies raw annotations and reads the documentation of a single
declaration (attached) or of a freestanding comment (standalone).
"""

from typing import List, Optional, Sequence, Tuple

from ..config import appsettings
from ..models.annotation import DeprecatedPayload, RawAnnotation, StringLiteral, TextPayload, ClassifiedAnnotation
from ..models.comment import Alert, Docs, DocsOrStop, Documentation, STOP, Tags, TagsPolicy
from ..models.location import Located, RawLocation
from ..models.paths import Identifier
from .errors import DocWarning, PayloadContractError, warning_raise, warnings_raise
from .location import location_pad, location_read
from .log import LOG
from .markup import markup_parse
from .semantics import comment_fromAst, comment_read

DEPRECATED_ALERT = "deprecated"


def payload_load(annotation: RawAnnotation) -> Optional[StringLiteral]:
    """The payload's string literal, if the payload is exactly one"""
    if len(annotation.payload) == 1 and isinstance(annotation.payload[0], StringLiteral):
        return annotation.payload[0]
    return None


def annotation_classify(annotation: RawAnnotation, text_kind: str = "text") -> Optional[ClassifiedAnnotation]:
    """
    Classify one annotation

    Args:
        annotation: Annotation to classify
        text_kind: Which spellings count as documentation text: "text" for
                   freestanding comments, "doc" for comments attached to a
                   declaration

    Returns:
        TextPayload, DeprecatedPayload, or None for any other name

    Raises:
        PayloadContractError: A documentation text annotation whose payload is
                              not a single string literal. The source parser
                              only ever attaches literals under these names.
    """
    kind = appsettings.attributeKind_get(annotation.name)

    if kind == text_kind:
        literal = payload_load(annotation)
        if literal is None:
            raise PayloadContractError(
                f"'{annotation.name}' annotation without a string literal payload: {annotation.payload!r}"
            )
        return TextPayload(literal.text, literal.location)

    if kind == "deprecated":
        literal = payload_load(annotation)
        return DeprecatedPayload(annotation.location, literal.text if literal is not None else None)

    return None


def stopMarker_is(classified: Optional[ClassifiedAnnotation]) -> bool:
    return isinstance(classified, TextPayload) and classified.text == appsettings.stop_marker


def stopComment_is(annotation: RawAnnotation) -> bool:
    """
    Check if a freestanding annotation is a stop comment

    Callers of extract_top_comment use this to report stop comments as
    Unrecognized items.
    """
    return stopMarker_is(annotation_classify(annotation))


def deprecated_toAlert(payload: DeprecatedPayload) -> Located:
    """Alert element at the deprecation annotation's own span"""
    return Located(location_read(payload.location), Alert(DEPRECATED_ALERT, payload.message))


def attached(
    policy: TagsPolicy, parent: Identifier, annotations: Sequence[RawAnnotation]
) -> Tuple[Documentation, Tags]:
    """
    Documentation of one declaration

    Every doc comment is parsed and concatenated in order; every deprecation
    annotation becomes an alert. Other annotations are ignored.

    Args:
        policy: Internal tags accepted on this declaration
        parent: Enclosing scope
        annotations: The declaration's annotations, in source order

    Returns:
        (documentation, tags)
    """
    ast_docs: List[Located] = []
    alerts: List[Located] = []

    for annotation in annotations:
        classified = annotation_classify(annotation, "doc")
        if isinstance(classified, TextPayload):
            ast_docs.extend(warnings_raise(markup_parse(location_pad(classified.location), classified.text)))
        elif isinstance(classified, DeprecatedPayload):
            alerts.append(deprecated_toAlert(classified))

    LOG(f"{parent}: {len(ast_docs)} block(s), {len(alerts)} alert(s) attached", level=3)
    return warnings_raise(comment_fromAst(policy, parent, ast_docs, alerts))


def attached_no_tag(parent: Identifier, annotations: Sequence[RawAnnotation]) -> Documentation:
    """Documentation of a declaration on which no internal tag is accepted"""
    docs, _ = attached(TagsPolicy.none(), parent, annotations)
    return docs


def page(parent: Identifier, location: RawLocation, text: str) -> Docs:
    """
    Documentation of a standalone page

    The whole text is markup, so it is read from location.start unpadded.
    """
    docs, _ = warnings_raise(comment_read(TagsPolicy.none(), parent, location.start, text))
    return Docs(docs)


def standalone(parent: Identifier, annotation: RawAnnotation) -> Optional[DocsOrStop]:
    """
    Interpret one freestanding annotation

    Returns:
        STOP for a stop comment, Docs for any other comment, None for a
        deprecation annotation (reported, it has nothing to attach to) or
        an annotation that carries no documentation
    """
    classified = annotation_classify(annotation)
    if stopMarker_is(classified):
        return STOP
    if isinstance(classified, TextPayload):
        docs, _ = warnings_raise(
            comment_read(TagsPolicy.none(), parent, location_pad(classified.location), classified.text)
        )
        return Docs(docs)
    if isinstance(classified, DeprecatedPayload):
        warning_raise(DocWarning("Deprecated attribute not expected here.", location_read(classified.location)))
        return None
    return None


def standalone_multiple(parent: Identifier, annotations: Sequence[RawAnnotation]) -> List[DocsOrStop]:
    """Interpret freestanding annotations in order, keeping the ones that produce a comment"""
    comments = []
    for annotation in annotations:
        comment = standalone(parent, annotation)
        if comment is not None:
            comments.append(comment)
    return comments
