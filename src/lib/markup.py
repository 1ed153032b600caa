"""
Parser for doc comment markup

Transforms the text of one documentation comment into located block elements.

The parser operates in two phases:
1. Lexing: DocCommentLexer splits the text into block-level tokens, each with
   its offset into the text
2. Building: tokens are folded into blocks (paragraphs and lists accumulate
   across tokens, everything else is a block on its own)

Problems never abort a parse. They are returned as warnings next to the
blocks and the offending construct is dropped or degraded.

Example:
    >>> origin = RawPosition("m.ml", 1, 0, 3)
    >>> result = markup_parse(origin, "Synopsis.\\n\\n{1 Usage}")
    >>> [element.value for element in result.value]
    [Paragraph(text='Synopsis.'), Heading(level=1, title='Usage', label=None, parent=None)]
"""

import re
import textwrap
from typing import List, Optional, Tuple

from pygments.lexers import get_lexer_by_name
from pygments.token import Error, Generic, Keyword, Name, String, Text
from pygments.util import ClassNotFound

from ..models.comment import CodeBlock, Heading, InternalTag, ListBlock, Paragraph, Tag, Verbatim
from ..models.location import Located, RawPosition
from .errors import DocWarning, WithWarnings
from .lexer import DocCommentLexer
from .location import span_ofText
from .log import LOG

_HEADING = re.compile(r'\s*\{(\d+)(?::([\w-]+))?\s+([^}]*)\}')
_CODE = re.compile(r'\{(?:@([\w-]+))?\[([\s\S]*?)(?:\]\})?$')
_VERBATIM = re.compile(r'\{v\s([\s\S]*?)(?:\sv\})?$')
_TAG = re.compile(r'\s*@([a-zA-Z]+)\s*(.*)')
_LIST_ITEM = re.compile(r'\s*([-+])\s+(.*)')

MAX_HEADING_LEVEL = 5

TAGS_WITH_TEXT = {"author", "before", "deprecated", "param", "raise", "return", "see", "since", "version"}
TAG_ALIASES = {"raises": "raise"}
INTERNAL_TAGS = {"canonical", "inline", "open", "closed", "hidden"}

LIST_KINDS = {"-": "unordered", "+": "ordered"}


class MarkupParser:
    """
    Parser for one doc comment

    Handles:
    - Paragraphs separated by blank lines
    - Headings with optional labels
    - Code blocks (optionally with a language) and verbatim blocks
    - Light list syntax with continuation lines
    - Block tags, including internal tags
    """

    def __init__(self, origin: RawPosition, text: str):
        """
        Initialize parser with comment text

        Args:
            origin: Source position of text[0]
            text: Comment text, delimiters already removed

        Attributes:
            blocks: Accumulated located block elements
            warnings: Accumulated warnings
            paragraph: Text chunks of the open paragraph
            paragraph_start, paragraph_end: Offsets of the open paragraph's text
            list_kind: Kind of the open list, None when no list is open
            list_items: Items of the open list
            list_start, list_end: Offsets of the open list
        """
        self.origin = origin
        self.text = text
        self.blocks: List[Located] = []
        self.warnings: List[DocWarning] = []

        self.paragraph: List[str] = []
        self.paragraph_start: Optional[int] = None
        self.paragraph_end = 0

        self.list_kind: Optional[str] = None
        self.list_items: List[str] = []
        self.list_start = 0
        self.list_end = 0

    def parse(self) -> WithWarnings[Tuple[Located, ...]]:
        """
        Parse the comment text into blocks

        Returns:
            WithWarnings holding the blocks in source order
        """
        for index, token, value in DocCommentLexer().get_tokens_unprocessed(self.text):
            if token is Text.Whitespace:
                self.pending_flush()
            elif token is Text or token is Error:
                self.text_add(index, value)
            elif token is Keyword:
                self.listItem_add(index, value)
            else:
                self.pending_flush()
                if token is Generic.Heading:
                    self.heading_add(index, value)
                elif token is String.Backtick:
                    self.code_add(index, value)
                elif token is String.Other:
                    self.verbatim_add(index, value)
                elif token is Generic.Error:
                    self.unterminated_add(index, value)
                elif token is Name.Decorator:
                    self.tag_add(index, value)
                else:
                    raise AssertionError(f"unexpected token {token} from DocCommentLexer")
        self.pending_flush()

        LOG(f"Parsed {len(self.blocks)} block(s), {len(self.warnings)} warning(s)", level=3)
        return WithWarnings(tuple(self.blocks), tuple(self.warnings))

    def located(self, begin: int, end: int, value) -> Located:
        return Located(span_ofText(self.origin, self.text, begin, end), value)

    def warning_add(self, message: str, begin: int, end: int) -> None:
        self.warnings.append(DocWarning(message, span_ofText(self.origin, self.text, begin, end)))

    def pending_flush(self) -> None:
        """Close the open paragraph or list, if any"""
        self.paragraph_flush()
        self.list_flush()

    def paragraph_flush(self) -> None:
        if self.paragraph_start is not None:
            words = ''.join(self.paragraph).split()
            self.blocks.append(
                self.located(self.paragraph_start, self.paragraph_end, Paragraph(' '.join(words)))
            )
        self.paragraph = []
        self.paragraph_start = None

    def list_flush(self) -> None:
        if self.list_kind is not None:
            self.blocks.append(
                self.located(self.list_start, self.list_end, ListBlock(self.list_kind, tuple(self.list_items)))
            )
        self.list_kind = None
        self.list_items = []

    def text_add(self, index: int, value: str) -> None:
        """Extend the open list item or paragraph with a text chunk"""
        stripped = value.strip()
        if not stripped:
            if self.paragraph_start is not None:
                self.paragraph.append(value)
            return

        if self.list_kind is not None:
            # Continuation line of the last item
            self.list_items[-1] = f"{self.list_items[-1]} {' '.join(stripped.split())}"
            self.list_end = index + len(value.rstrip())
            return

        if self.paragraph_start is None:
            self.paragraph_start = index + len(value) - len(value.lstrip())
        self.paragraph.append(value)
        self.paragraph_end = index + len(value.rstrip())

    def listItem_add(self, index: int, value: str) -> None:
        match = _LIST_ITEM.match(value)
        kind = LIST_KINDS[match.group(1)]
        begin = index + match.start(1)

        self.paragraph_flush()
        if self.list_kind != kind:
            self.list_flush()
            self.list_kind = kind
            self.list_start = begin

        self.list_items.append(' '.join(match.group(2).split()))
        self.list_end = index + len(value.rstrip())

    def heading_add(self, index: int, value: str) -> None:
        """
        Add a heading block

        Levels outside 0-5 are reported and the title is kept as a paragraph.
        """
        match = _HEADING.match(value)
        level = int(match.group(1))
        label = match.group(2)
        title = ' '.join(match.group(3).split())
        begin = index + len(value) - len(value.lstrip())
        end = index + len(value)

        if level > MAX_HEADING_LEVEL:
            self.warning_add(f"'{level}': bad heading level (0-{MAX_HEADING_LEVEL} allowed).", begin, end)
            if title:
                self.blocks.append(self.located(begin, end, Paragraph(title)))
            return

        self.blocks.append(self.located(begin, end, Heading(level=level, title=title, label=label)))

    def code_add(self, index: int, value: str) -> None:
        match = _CODE.match(value)
        language = match.group(1)
        end = index + len(value)

        if language is not None:
            try:
                get_lexer_by_name(language)
            except ClassNotFound:
                self.warning_add(f"Unknown code block language '{language}'.", index, end)

        content = textwrap.dedent(match.group(2).strip('\n')).rstrip()
        self.blocks.append(self.located(index, end, CodeBlock(content=content, language=language)))

    def verbatim_add(self, index: int, value: str) -> None:
        match = _VERBATIM.match(value)
        self.blocks.append(self.located(index, index + len(value), Verbatim(match.group(1))))

    def unterminated_add(self, index: int, value: str) -> None:
        """Report a code or verbatim block running off the end and keep its text"""
        end = index + len(value)
        if value.startswith('{v'):
            self.warning_add("End of text is not allowed in '{v ... v}' (verbatim text).", index, end)
            self.verbatim_add(index, value)
        else:
            self.warning_add("End of text is not allowed in '{[...]}' (code block).", index, end)
            self.code_add(index, value)

    def tag_add(self, index: int, value: str) -> None:
        match = _TAG.match(value)
        name = TAG_ALIASES.get(match.group(1), match.group(1))
        text = match.group(2).strip() or None
        begin = index + match.start(1) - 1
        end = index + len(value.rstrip())

        if name in INTERNAL_TAGS:
            self.blocks.append(self.located(begin, end, InternalTag(name, text)))
        elif name in TAGS_WITH_TEXT:
            self.blocks.append(self.located(begin, end, Tag(name, text)))
        else:
            self.warning_add(f"Unknown tag '@{match.group(1)}'.", begin, end)


def markup_parse(origin: RawPosition, text: str) -> WithWarnings[Tuple[Located, ...]]:
    """Parse one comment's text, text[0] sitting at origin"""
    return MarkupParser(origin, text).parse()
