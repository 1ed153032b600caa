"""
Diagnostics raised while extracting documentation

Warnings are values: the markup parser and the semantic assembler return them
alongside their result (WithWarnings), and callers push them through
warnings_raise(). What happens to a raised warning depends on the caller:

- inside ``with warnings_catch() as caught:`` it is appended to ``caught``
- in strict mode (DOCATTR_STRICT_MODE=true) it is raised as an exception
- otherwise it is logged through loguru

PayloadContractError is different: it reports a broken upstream guarantee
and is never caught here.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

from loguru import logger

from ..config import appsettings
from ..models.location import SourceSpan

T = TypeVar("T")

_caught: ContextVar[Optional[List["DocWarning"]]] = ContextVar('caught_warnings', default=None)


class DocDiagnostic(Exception):
    """
    Diagnostic pointing at a span of source

    Attributes:
        message: Human-readable description
        span: Where the problem is
    """

    def __init__(self, message: str, span: SourceSpan) -> None:
        super().__init__(message)
        self.message = message
        self.span = span

    def __str__(self) -> str:
        span = self.span
        if span.start.line == span.end.line:
            where = f"line {span.start.line}, characters {span.start.column}-{span.end.column}"
        else:
            where = (
                f"line {span.start.line}, character {span.start.column} "
                f"to line {span.end.line}, character {span.end.column}"
            )
        return f'File "{span.file}", {where}:\n{self.message}'

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return (self.message, self.span) == (other.message, other.span)

    def __hash__(self) -> int:
        return hash((type(self), self.message, self.span))


class DocWarning(DocDiagnostic):
    """Recoverable problem: the offending construct is dropped or degraded"""


class PayloadContractError(AssertionError):
    """A documentation annotation did not carry a single string literal"""


@dataclass(frozen=True)
class WithWarnings(Generic[T]):
    """Result paired with the warnings produced while computing it"""
    value: T
    warnings: Tuple[DocWarning, ...] = ()


def warning_raise(warning: DocWarning) -> None:
    """
    Report one warning to the active sink

    Raises:
        DocWarning: In strict mode
    """
    if appsettings.strict_mode:
        raise warning
    caught = _caught.get()
    if caught is None:
        logger.warning(str(warning))
    else:
        caught.append(warning)


def warnings_raise(result: WithWarnings[T]) -> T:
    """Report every warning of result, in order, and return its value"""
    for warning in result.warnings:
        warning_raise(warning)
    return result.value


@contextmanager
def warnings_catch() -> Iterator[List[DocWarning]]:
    """
    Collect warnings raised in the block instead of logging them

    Example:
        with warnings_catch() as caught:
            standalone(parent, annotation)
        assert len(caught) == 1
    """
    caught: List[DocWarning] = []
    token = _caught.set(caught)
    try:
        yield caught
    finally:
        _caught.reset(token)
