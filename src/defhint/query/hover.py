"""Hover text for a resolved definition."""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any

from defhint.index.models import Definition, Parameter


def format_parameter(param: Parameter) -> str:
    text = param.name
    if param.type_hint is not None:
        text += f": {param.type_hint}"
    if param.default_value is not None:
        text += f" = {param.default_value}"
    return text


def format_signature(definition: Definition) -> str:
    """``<keyword> <name>(<param[: type][ = default]>, ...)``"""
    params = ", ".join(format_parameter(p) for p in definition.parameters or ())
    return f"{definition.keyword} {definition.name}({params})"


@dataclass(frozen=True, slots=True)
class HoverResult:
    """Structured hover content; rendering is up to the host."""

    name: str
    kind: str
    signature: str
    parameters: tuple[Parameter, ...]
    description: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "kind": self.kind,
            "signature": self.signature,
            "parameters": [p.to_dict() for p in self.parameters],
            "description": self.description,
        }

    def to_markdown(self) -> str:
        lines = [f"**{self.name}** (*{self.kind}*)", ""]
        if self.parameters:
            lines.append("### Parameters:")
            lines.append("```python")
            lines.extend(f"  {format_parameter(p)}" for p in self.parameters)
            lines.append("```")
        if self.description:
            lines.extend(["", self.description])
        return "\n".join(lines)


def hover_for(definition: Definition | None) -> HoverResult | None:
    """Hover content for ``definition``; None when there is nothing structured to show."""
    if definition is None or definition.is_degenerate:
        return None
    assert definition.name is not None and definition.kind is not None
    description = inspect.cleandoc(definition.description) if definition.description else None
    return HoverResult(
        name=definition.name,
        kind=definition.kind,
        signature=format_signature(definition),
        parameters=definition.parameters or (),
        description=description or None,
    )
