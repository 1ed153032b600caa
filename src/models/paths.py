"""
Scope identifiers

The enclosing scope of a comment is only used as a parent reference (heading
labels, diagnostics); docattr never resolves it.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Identifier:
    """
    Identity of a declaration or module

    Attributes:
        kind: What the identifier names ("root", "module", "class", ...)
        name: Unqualified name
        parent: Enclosing identifier, None for a root

    Example:
        >>> root = Identifier("root", "Stdlib")
        >>> str(Identifier("module", "List", root))
        'Stdlib.List'
    """
    kind: str
    name: str
    parent: Optional["Identifier"] = None

    def __str__(self) -> str:
        if self.parent is None:
            return self.name
        return f"{self.parent}.{self.name}"
