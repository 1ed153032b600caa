"""
Semantic assembly of parsed comments

Turns the blocks of one or more parsed comments plus the alerts gathered from
annotations into final documentation and the internal tags a TagsPolicy keeps.
"""

import re
from dataclasses import replace
from typing import List, Sequence, Tuple

from ..models.comment import Documentation, Heading, InternalTag, Tags, TagsPolicy
from ..models.location import Located, RawPosition
from ..models.paths import Identifier
from .errors import DocWarning, WithWarnings
from .markup import markup_parse

_LABEL_SEPARATORS = re.compile(r'[^a-z0-9_]+')


def label_generate(title: str) -> str:
    """
    Label of a heading written without one

    Example:
        >>> label_generate("Getting Started!")
        'getting-started'
    """
    return _LABEL_SEPARATORS.sub('-', title.lower()).strip('-')


def comment_fromAst(
    policy: TagsPolicy,
    parent: Identifier,
    ast: Sequence[Located],
    alerts: Sequence[Located],
) -> WithWarnings[Tuple[Documentation, Tags]]:
    """
    Assemble parsed blocks and alerts into documentation and tags

    Args:
        policy: Internal tags accepted here
        parent: Scope the headings' labels belong to
        ast: Parsed blocks, in source order
        alerts: Located Alert elements, in source order

    Returns:
        WithWarnings holding (documentation, tags). Documentation is the blocks
        with internal tags removed, followed by the alerts.
    """
    docs: List[Located] = []
    tags: List[Located] = []
    warnings: List[DocWarning] = []

    for element in ast:
        value = element.value
        if isinstance(value, InternalTag):
            if policy.accepts(value.name):
                tags.append(element)
            else:
                warnings.append(DocWarning(f"Unexpected tag '@{value.name}' at this location.", element.span))
        elif isinstance(value, Heading):
            label = value.label or label_generate(value.title)
            docs.append(replace(element, value=replace(value, label=label, parent=parent)))
        else:
            docs.append(element)

    docs.extend(alerts)
    return WithWarnings((tuple(docs), tuple(tags)), tuple(warnings))


def comment_read(
    policy: TagsPolicy,
    parent: Identifier,
    origin: RawPosition,
    text: str,
) -> WithWarnings[Tuple[Documentation, Tags]]:
    """Parse one comment's text and assemble it with no alerts"""
    parsed = markup_parse(origin, text)
    assembled = comment_fromAst(policy, parent, parsed.value, ())
    return WithWarnings(assembled.value, parsed.warnings + assembled.warnings)
