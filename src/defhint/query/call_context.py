"""Innermost call context of a line prefix.

``call_context`` reduces the text left of the cursor to the dotted path of
the call or namespace the cursor sits in. It does a single left to right
scan with a stack of open-parenthesis boundaries:

- ``(`` pushes the current length of the output;
- a ``)`` that closes an open ``(`` truncates the output back to that
  boundary, dropping the whole finished call;
- a ``)`` with nothing open discards everything before it.

The result equals repeatedly deleting the last parenthesis pair that holds
no other parentheses, then cutting through the last unmatched ``)``.
Parentheses inside string literals are counted like any other.
"""

from __future__ import annotations


def call_context(line_prefix: str, triggered_by_comma: bool = False) -> str:
    """Return the path of the call enclosing the end of ``line_prefix``.

    Args:
        line_prefix: Text of the current line up to the cursor.
        triggered_by_comma: Completion was triggered by typing ``,``. The
            result is then cut back to the innermost open ``(`` so that
            every argument position resolves to the same call.

    Examples:
        ``obj.method(a, nested(1,2), `` with a comma trigger gives
        ``obj.method(``; ``first(x).second(`` gives ``first.second(``;
        ``done()) + other(`` gives `` + other(``.
    """
    out: list[str] = []
    boundaries: list[int] = []

    for ch in line_prefix:
        if ch == "(":
            boundaries.append(len(out))
            out.append(ch)
        elif ch == ")":
            if boundaries:
                del out[boundaries.pop() :]
            else:
                out.clear()
        else:
            out.append(ch)

    tail = "".join(out)
    if triggered_by_comma and boundaries:
        tail = tail[: boundaries[-1]] + "("
    return tail
