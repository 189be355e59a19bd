"""Completion candidates for a resolved definition."""

from __future__ import annotations

from defhint.config.models import HintsConfig
from defhint.index.models import Definition


def completion_items(definition: Definition | None, hints: HintsConfig) -> list[str]:
    """Literal insertion strings for ``definition``.

    Parameters come first as ``name=`` (plus ``name=default`` when
    ``hints.add_param_defaults`` is set), followed by member names for
    classes. Degenerate or missing definitions give no candidates.
    """
    if definition is None or definition.is_degenerate:
        return []

    items: list[str] = []
    for param in definition.parameters or ():
        if param.name in hints.blocked_params:
            continue
        items.append(f"{param.name}=")
        if hints.add_param_defaults and param.default_value is not None:
            items.append(f"{param.name}={param.default_value}")

    if definition.children is not None:
        items.extend(
            name for name in definition.children if name not in hints.reserved_field_names
        )
    return items
