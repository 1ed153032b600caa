"""
Top comment extraction

Finds the introductory comment of a scope body (a module, a signature) and
splits documentation into synopsis and rest.

The scan walks the body with a single forward cursor in one of two phases:

    LEADING   looking for the first comment
              Alert → remembered, consumed
              Skip  → kept in the remaining items, in place
              Text  → parsed as the top comment, switch to TRAILING
              Stop  → give up: every item is returned untouched

    TRAILING  gathering the alerts right after the comment
              Alert → remembered, consumed
              Skip  → consumed and dropped
              Text  → this item onwards is returned
              Stop  → this item onwards is returned

Example:
    >>> remaining, (synopsis, rest), tags = extract_top_comment(
    ...     TagsPolicy.none(), classify, parent, items)
"""

from enum import Enum
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..models.annotation import (
    AnnotationLike,
    ClassComment,
    DeprecatedPayload,
    ItemClass,
    OpenLike,
    TextPayload,
    Unrecognized,
)
from ..models.comment import Docs, Documentation, Heading, Tags, TagsPolicy
from ..models.location import Located, RawLocation
from ..models.paths import Identifier
from .attributes import annotation_classify, deprecated_toAlert
from .errors import warnings_raise
from .location import location_pad
from .log import LOG
from .markup import markup_parse
from .semantics import comment_fromAst

# Maps a scope item to what it is as far as documentation goes. Stop comments
# ("/*") must come back as Unrecognized: the scanner itself never checks for
# them (see attributes.stopComment_is). None counts as Unrecognized.
Classifier = Callable[[Any], Optional[ItemClass]]


class ScanPhase(Enum):
    LEADING = "leading"
    TRAILING = "trailing"


@dataclass(frozen=True)
class ScannedText:
    text: str
    location: RawLocation


@dataclass(frozen=True)
class ScannedAlert:
    alert: Located


@dataclass(frozen=True)
class ScannedSkip:
    pass


@dataclass(frozen=True)
class ScannedStop:
    pass


SKIP = ScannedSkip()
STOP_SCAN = ScannedStop()


def item_scan(classify: Classifier, item: Any):
    """
    What one scope item means to the scan

    Returns:
        ScannedText, ScannedAlert, SKIP or STOP_SCAN
    """
    item_class = classify(item)

    if isinstance(item_class, AnnotationLike):
        classified = annotation_classify(item_class.annotation)
        if isinstance(classified, TextPayload):
            return ScannedText(classified.text, classified.location)
        if isinstance(classified, DeprecatedPayload):
            return ScannedAlert(deprecated_toAlert(classified))
        if classified is None:
            return SKIP
        raise AssertionError(f"unhandled annotation class {classified!r}")

    if isinstance(item_class, OpenLike):
        return SKIP
    if item_class is None or isinstance(item_class, Unrecognized):
        return STOP_SCAN
    raise TypeError(f"classifier returned {item_class!r} for {item!r}")


def split_docs(docs: Documentation) -> Tuple[Documentation, Documentation]:
    """
    Split documentation at its first heading

    Returns:
        (synopsis, rest): synopsis holds no heading, rest starts with the
        first heading; synopsis + rest == docs

    Example:
        [Paragraph, Heading, Paragraph] → ([Paragraph], [Heading, Paragraph])
    """
    docs = tuple(docs)
    for index, element in enumerate(docs):
        if isinstance(element.value, Heading):
            return docs[:index], docs[index:]
    return docs, ()


def extract_top_comment(
    policy: TagsPolicy,
    classify: Classifier,
    parent: Identifier,
    items: Sequence[Any],
) -> Tuple[List[Any], Tuple[Documentation, Documentation], Tags]:
    """
    Extract the top comment of a scope body

    Args:
        policy: Internal tags accepted in the top comment
        classify: Caller's item classifier (see Classifier)
        parent: The scope whose body this is
        items: The body, in source order

    Returns:
        (remaining_items, (synopsis, rest), tags). remaining_items are the
        items the caller still has to process: leading skipped items in their
        original order, then everything from the item that ended the scan.
    """
    items = list(items)
    kept: List[Any] = []
    remaining: List[Any] = []
    ast_docs: Sequence[Located] = ()
    leading_alerts: List[Located] = []
    trailing_alerts: List[Located] = []

    phase = ScanPhase.LEADING
    cursor = 0
    while cursor < len(items):
        item = items[cursor]
        scanned = item_scan(classify, item)

        if phase is ScanPhase.LEADING:
            if isinstance(scanned, ScannedText):
                LOG(f"{parent}: top comment is item {cursor}", level=3)
                ast_docs = warnings_raise(markup_parse(location_pad(scanned.location), scanned.text))
                phase = ScanPhase.TRAILING
            elif isinstance(scanned, ScannedAlert):
                leading_alerts.append(scanned.alert)
            elif isinstance(scanned, ScannedSkip):
                kept.append(item)
            elif isinstance(scanned, ScannedStop):
                LOG(f"{parent}: no top comment before item {cursor}", level=3)
                kept, remaining, leading_alerts = [], items, []
                break
            else:
                raise AssertionError(f"unhandled scan result {scanned!r}")

        elif phase is ScanPhase.TRAILING:
            if isinstance(scanned, ScannedAlert):
                trailing_alerts.append(scanned.alert)
            elif isinstance(scanned, ScannedSkip):
                # Dropped, unlike skipped items before the comment
                pass
            elif isinstance(scanned, (ScannedText, ScannedStop)):
                remaining = items[cursor:]
                break
            else:
                raise AssertionError(f"unhandled scan result {scanned!r}")

        cursor += 1

    docs, tags = warnings_raise(comment_fromAst(policy, parent, ast_docs, leading_alerts + trailing_alerts))
    return kept + remaining, split_docs(docs), tags


def extract_top_comment_class(items: Sequence[Any]) -> Tuple[List[Any], Tuple[Documentation, Documentation]]:
    """
    Extract the top comment of a class body

    Class bodies hold already interpreted comments, so only a leading
    ClassComment carrying documentation is consumed.
    """
    items = list(items)
    if items and isinstance(items[0], ClassComment) and isinstance(items[0].comment, Docs):
        return items[1:], split_docs(items[0].comment.documentation)
    return items, ((), ())
