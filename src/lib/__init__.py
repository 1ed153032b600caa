"""
docattr - Documentation extraction from source annotations

Reads doc comments, stop comments and deprecation alerts attached as
annotations to a parsed source tree.
"""

__version__ = "1.0.0"

from .attributes import attached, attached_no_tag, page, standalone, standalone_multiple, stopComment_is
from .extract import extract_top_comment, extract_top_comment_class, split_docs
from .errors import DocWarning, PayloadContractError, warnings_catch
from .log import LOG, state_connectToLogger

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
