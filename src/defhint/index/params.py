"""Parameter list parsing.

Turns the text between a header's parentheses into Parameter records without
a real tokenizer. The list is split on commas first; a comma that sat inside
a string default (``sep=", "``) splits that default in two, so segments that
continue an open string are glued back onto the previous parameter.

Defaults holding bracketed structures with commas (``x=[1, 2]``) are not
reassembled.
"""

from __future__ import annotations

import re
from collections.abc import Collection
from dataclasses import replace

from defhint.config.constants import QUOTE_CHARS
from defhint.index.models import Parameter

_COMMA = re.compile(r"(\s*,\s*)")


def _has_open_string(text: str) -> bool:
    """True if ``text`` ends inside a string literal."""
    quote: str | None = None
    escaped = False
    for ch in text:
        if escaped:
            escaped = False
        elif quote is not None and ch == "\\":
            escaped = True
        elif quote is None and ch in QUOTE_CHARS:
            quote = ch
        elif ch == quote:
            quote = None
    return quote is not None


def _continues_default(previous: Parameter, segment: str) -> bool:
    if previous.default_value is None:
        return False
    return segment[:1] in QUOTE_CHARS or _has_open_string(previous.default_value)


def _parse_segment(segment: str) -> Parameter:
    name_part, has_default, default = segment.partition("=")
    name, has_hint, hint = name_part.partition(":")
    return Parameter(
        name=name.strip(),
        type_hint=(hint.strip() or None) if has_hint else None,
        default_value=(default.strip() or None) if has_default else None,
    )


def parse_parameters(
    param_text: str,
    blocked_params: Collection[str] = (),
) -> tuple[Parameter, ...]:
    """Parse a raw parameter list into Parameters, in declaration order.

    Args:
        param_text: Text between the header's parentheses.
        blocked_params: Names dropped from the result. A dropped parameter
            still absorbs its own string-continuation segments.

    Returns:
        Tuple of parameters; empty for an empty list.
    """
    parts = _COMMA.split(param_text)
    segments = parts[0::2]
    delimiters = ["", *parts[1::2]]

    params: list[Parameter] = []
    previous: Parameter | None = None
    previous_kept = False

    for segment, delimiter in zip(segments, delimiters):
        if previous is not None and _continues_default(previous, segment):
            previous = replace(
                previous,
                default_value=f"{previous.default_value}{delimiter}{segment}",
            )
            if previous_kept:
                params[-1] = previous
            continue

        segment = segment.strip()
        if not segment:
            continue

        previous = _parse_segment(segment)
        previous_kept = previous.name not in blocked_params
        if previous_kept:
            params.append(previous)

    if previous is not None and previous.default_value is not None and previous_kept:
        params[-1] = replace(previous, default_value=previous.default_value.strip())

    return tuple(params)
