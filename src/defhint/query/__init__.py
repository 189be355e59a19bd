"""Read-only queries against a built index."""

from defhint.query.call_context import call_context
from defhint.query.completion import completion_items
from defhint.query.hover import HoverResult, format_signature, hover_for
from defhint.query.names import NameMapper
from defhint.query.resolver import resolve
from defhint.query.tokens import context_token, split_path, word_range_at

__all__ = [
    "call_context",
    "completion_items",
    "context_token",
    "format_signature",
    "hover_for",
    "HoverResult",
    "NameMapper",
    "resolve",
    "split_path",
    "word_range_at",
]
