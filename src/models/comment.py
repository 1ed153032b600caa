"""
Documentation comment models

Block elements produced by the markup parser, the alert element produced from
deprecation annotations, and the containers handed back to callers.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Tuple, Union

from .location import Located
from .paths import Identifier


@dataclass(frozen=True)
class Paragraph:
    """Run of text lines, whitespace collapsed"""
    text: str


@dataclass(frozen=True)
class Heading:
    """
    Section heading

    Attributes:
        level: Heading level, 0 (page title) to 5
        title: Heading text
        label: Label written in source ({2:label ...}), or generated during
               semantic assembly
        parent: Scope the label belongs to, set during semantic assembly
    """
    level: int
    title: str
    label: Optional[str] = None
    parent: Optional[Identifier] = None


@dataclass(frozen=True)
class CodeBlock:
    """{[ ... ]} or {@lang[ ... ]} block"""
    content: str
    language: Optional[str] = None


@dataclass(frozen=True)
class Verbatim:
    """{v ... v} block"""
    content: str


@dataclass(frozen=True)
class ListBlock:
    """Consecutive '- ' (unordered) or '+ ' (ordered) items"""
    kind: str
    items: Tuple[str, ...]


@dataclass(frozen=True)
class Tag:
    """
    Block tag written in the comment text (@since 4.08, @author ...)

    Attributes:
        name: Tag name without '@' ("raises" is normalised to "raise")
        text: Remainder of the tag line, None when empty
    """
    name: str
    text: Optional[str] = None


@dataclass(frozen=True)
class Alert:
    """
    Machine-readable alert built from an annotation, e.g. a deprecation

    Attributes:
        name: Alert name; "deprecated" is the only one produced
        message: Annotation message, if the annotation carried one
    """
    name: str
    message: Optional[str] = None


@dataclass(frozen=True)
class InternalTag:
    """
    Tag consumed by the documentation generator itself (@canonical, @inline,
    @open, @closed, @hidden). Never part of the rendered documentation.
    """
    name: str
    value: Optional[str] = None


DocElement = Union[Paragraph, Heading, CodeBlock, Verbatim, ListBlock, Tag, Alert]

# Ordered block elements, in source order
Documentation = Tuple[Located, ...]

# Internal tags kept under a TagsPolicy, in source order
Tags = Tuple[Located, ...]


@dataclass(frozen=True)
class Docs:
    """A standalone comment that carries documentation"""
    documentation: Documentation


@dataclass(frozen=True)
class Stop:
    """A standalone stop comment: documentation collection stops here"""


STOP = Stop()

DocsOrStop = Union[Docs, Stop]


STATUS_TAGS: FrozenSet[str] = frozenset({"inline", "open", "closed"})


@dataclass(frozen=True)
class TagsPolicy:
    """
    Internal tags accepted during semantic assembly

    Attributes:
        allowed: Internal tag names kept in the returned tags; any other
                 internal tag is reported and dropped

    Example:
        >>> TagsPolicy.status().accepts("inline")
        True
        >>> TagsPolicy.none().accepts("canonical")
        False
    """
    allowed: FrozenSet[str] = field(default_factory=frozenset)

    @classmethod
    def none(cls) -> "TagsPolicy":
        return cls()

    @classmethod
    def status(cls) -> "TagsPolicy":
        return cls(STATUS_TAGS)

    @classmethod
    def canonical(cls) -> "TagsPolicy":
        return cls(frozenset({"canonical"}))

    @classmethod
    def of(cls, *names: str) -> "TagsPolicy":
        return cls(frozenset(names))

    def accepts(self, name: str) -> bool:
        return name in self.allowed
