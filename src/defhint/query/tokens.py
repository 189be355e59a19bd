"""Token extraction from a single line of edited code."""

from __future__ import annotations

import re

_WORD = re.compile(r"\w+")
_NOT_PATH = re.compile(r"[^A-Za-z0-9_.]+")
_TRAILING_WORD = re.compile(r"\w*$")


def word_range_at(line: str, column: int) -> tuple[int, int] | None:
    """Span of the identifier under the cursor, or ending right before it.

    ``column`` is a 0-based offset between characters, as editors report
    cursor positions.
    """
    for match in _WORD.finditer(line):
        if match.start() <= column <= match.end():
            return match.span()
        if match.start() > column:
            break
    return None


def context_token(text_before: str) -> str:
    """The dotted path immediately left of a token, without trailing dots.

    >>> context_token("x = obj.")
    'obj'
    >>> context_token("call(pkg.mod.")
    'pkg.mod'
    """
    return _NOT_PATH.split(text_before)[-1].rstrip(".")


def split_path(path: str) -> tuple[str, str]:
    """Split a call path into ``(context_token, primary_token)``.

    One trailing ``.`` or ``(`` is dropped first, so ``obj.method(`` gives
    ``("obj", "method")`` and ``obj.`` gives ``("", "obj")``.
    """
    if path.endswith((".", "(")):
        path = path[:-1]
    primary = _TRAILING_WORD.search(path)
    assert primary is not None
    return context_token(path[: primary.start()]), primary.group()
