"""Resolution of a (token, context token) pair against the index."""

from __future__ import annotations

from defhint.index.models import Definition, Index
from defhint.query.names import NameMapper


def resolve(
    index: Index,
    mapper: NameMapper,
    primary_token: str,
    context_token: str = "",
) -> Definition | None:
    """Find the definition a token identifies.

    Tries the token as a top-level name first, then as a member of the
    context token. An empty ``primary_token`` with a resolvable context
    (``obj.`` with nothing typed after the dot) yields the context itself.

    Returns:
        The Definition, or None when nothing matches or a match is blocked.
    """
    primary = mapper.to_canonical(primary_token)
    found = index.get(primary)
    if found is not None and not mapper.is_blocked(primary_token, primary):
        return found

    context = mapper.to_canonical(context_token)
    owner = index.get(context)
    if owner is None or mapper.is_blocked(context_token, context):
        return None
    if not primary_token:
        return owner
    if owner.children is None:
        return None
    child = owner.children.get(primary)
    if child is None or mapper.is_blocked(primary_token, primary):
        return None
    return child
