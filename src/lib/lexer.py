"""
Pygments lexer for documentation comment markup

Splits the text of a doc comment into block-level tokens. The markup parser
(markup.py) consumes get_tokens_unprocessed() directly so that every token
keeps its offset into the comment text.

Token types:
- Generic.Heading: {N text} / {N:label text}
- String.Backtick: {[ code ]} / {@lang[ code ]}
- String.Other: {v verbatim v}
- Generic.Error: code or verbatim block running to the end of the text
- Name.Decorator: @tag line
- Keyword: '- ' / '+ ' list item line
- Text.Whitespace: blank line(s), i.e. a block break
- Text: everything else
"""

import re

from pygments.lexer import RegexLexer
from pygments.token import Generic, Keyword, Name, String, Text


class DocCommentLexer(RegexLexer):
    """
    Lexer for doc comment markup

    Example:
        Synopsis.

        {1 Usage}
        @since 4.08

    Tokens:
        "Synopsis." → Text
        "\\n\\n" → Text.Whitespace
        "{1 Usage}" → Generic.Heading
        "@since 4.08" → Name.Decorator
    """

    name = 'DocComment'
    aliases = ['doccomment']
    filenames = []

    flags = re.MULTILINE

    tokens = {
        'root': [
            # Blank line(s) end the current block
            (r'\n[ \t]*\n(?:[ \t]*\n)*', Text.Whitespace),

            # Headings must open a line
            (r'^[ \t]*\{\d+(?::[\w-]+)?[ \t]+[^}\n]*\}', Generic.Heading),

            # Tags own the rest of their line
            (r'^[ \t]*@[a-zA-Z]+[^\n]*', Name.Decorator),

            # List items
            (r'^[ \t]*[-+][ \t]+[^\n]*', Keyword),

            # Code blocks, then the same opener left unterminated
            (r'\{(?:@[\w-]+)?\[[\s\S]*?\]\}', String.Backtick),
            (r'\{(?:@[\w-]+)?\[[\s\S]*', Generic.Error),

            # Verbatim blocks, then the same opener left unterminated
            (r'\{v\s[\s\S]*?\sv\}', String.Other),
            (r'\{v\s[\s\S]*', Generic.Error),

            # Everything else is text
            (r'\n', Text),
            (r'[^\n{]+', Text),
            (r'\{', Text),
        ],
    }
