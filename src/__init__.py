"""
docattr - Documentation extraction from source annotations

Turns doc comment annotations on declarations and scope bodies into
structured documentation and alerts for a documentation generator.
"""

__version__ = "1.0.0"

from .lib import (
    attached,
    attached_no_tag,
    page,
    standalone,
    standalone_multiple,
    stopComment_is,
    extract_top_comment,
    extract_top_comment_class,
    split_docs,
    DocWarning,
    PayloadContractError,
    warnings_catch,
    LOG,
    state_connectToLogger,
)

__all__ = [
    "attached",
    "attached_no_tag",
    "page",
    "standalone",
    "standalone_multiple",
    "stopComment_is",
    "extract_top_comment",
    "extract_top_comment_class",
    "split_docs",
    "DocWarning",
    "PayloadContractError",
    "warnings_catch",
    "LOG",
    "state_connectToLogger",
    "__version__",
]
