"""Index data model: parameters, definitions and the index mapping.

A Definition whose header could not be parsed is *degenerate*: it carries its
raw source text and nothing else. Consumers must branch on ``is_degenerate``
(or on the individual ``None`` fields) rather than treating it as a
definition with no parameters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

DefinitionKind = Literal["func", "class"]


@dataclass(frozen=True, slots=True)
class Parameter:
    """One entry of a definition's parameter list."""

    name: str
    type_hint: str | None = None
    default_value: str | None = None  # raw, unevaluated source text

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type_hint": self.type_hint,
            "default_value": self.default_value,
        }


@dataclass(frozen=True, slots=True)
class Definition:
    """An indexed function or class."""

    raw_source: str
    name: str | None = None
    kind: DefinitionKind | None = None
    keyword: str | None = None
    description: str | None = None
    parameters: tuple[Parameter, ...] | None = None
    children: dict[str, Definition] | None = None  # class methods, kind="class" only

    @classmethod
    def degenerate(cls, raw_source: str) -> Definition:
        return cls(raw_source=raw_source)

    @property
    def is_degenerate(self) -> bool:
        return self.name is None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output. Absent fields are omitted."""
        data: dict[str, Any] = {"raw_source": self.raw_source}
        if self.is_degenerate:
            return data
        data.update(name=self.name, kind=self.kind, keyword=self.keyword)
        data["description"] = self.description
        if self.parameters is not None:
            data["parameters"] = [p.to_dict() for p in self.parameters]
        if self.children is not None:
            data["children"] = {name: child.to_dict() for name, child in self.children.items()}
        return data


Index = dict[str, Definition]
"""Top-level name -> Definition, in order of first appearance in the source."""


def index_to_dict(index: Index) -> dict[str, Any]:
    return {name: definition.to_dict() for name, definition in index.items()}
