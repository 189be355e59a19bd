"""Alias <-> canonical name mapping and block lists."""

from __future__ import annotations

from collections.abc import Collection, Mapping

from defhint.config.models import HintsConfig


class NameMapper:
    """Two-way alias table plus the canonical and alias block lists.

    Block checks always test the canonical name against ``blocked_canonical``
    and the token as typed against ``blocked_alias``.
    """

    def __init__(
        self,
        mapping: Mapping[str, str] | None = None,
        *,
        blocked_canonical: Collection[str] = (),
        blocked_alias: Collection[str] = (),
    ) -> None:
        self._to_canonical: dict[str, str] = dict(mapping or {})
        self._to_aliases: dict[str, list[str]] = {}
        for alias, canonical in self._to_canonical.items():
            self._to_aliases.setdefault(canonical, []).append(alias)
        self.blocked_canonical = frozenset(blocked_canonical)
        self.blocked_alias = frozenset(blocked_alias)

    @classmethod
    def from_config(cls, hints: HintsConfig) -> NameMapper:
        return cls(
            hints.mapping,
            blocked_canonical=hints.blocked_canonical,
            blocked_alias=hints.blocked_alias,
        )

    def to_canonical(self, token: str) -> str:
        return self._to_canonical.get(token, token)

    def aliases_for(self, canonical: str) -> tuple[str, ...]:
        return tuple(self._to_aliases.get(canonical, ()))

    def is_blocked(self, as_typed: str, canonical: str) -> bool:
        return as_typed in self.blocked_alias or canonical in self.blocked_canonical
