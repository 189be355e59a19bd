"""Indentation-scoped source indexing.

Scans a module top to bottom and builds the Index of top-level definitions,
attaching a class's methods as its children. Blocks are delimited purely by
indentation: a block runs from its header to the line before the next
non-blank line indented no deeper than the header.

Only one level of nesting is indexed. Functions nested in a method (or
classes nested in a class) stay part of the enclosing raw source.
"""

from __future__ import annotations

import re
from collections.abc import Collection, Sequence
from dataclasses import dataclass, replace
from functools import lru_cache

import structlog

from defhint.config.models import DialectConfig
from defhint.index.extractor import extract_definition
from defhint.index.models import Definition, Index

log = structlog.get_logger(__name__)


@dataclass(slots=True)
class _OpenBlock:
    """A def/class header whose block has not ended yet."""

    depth: int
    class_name: str | None = None  # set for indexed top-level classes only


@lru_cache(maxsize=8)
def _header_start(def_keyword: str, class_keyword: str) -> re.Pattern[str]:
    return re.compile(
        rf"^\s*(?P<keyword>{re.escape(def_keyword)}|{re.escape(class_keyword)})\s+(?P<name>\w+)"
    )


def indentation(line: str) -> int:
    """Width of the leading whitespace; every whitespace character counts as one."""
    return len(line) - len(line.lstrip())


def get_block(lines: Sequence[str], start: int) -> str:
    """Return the block whose header is ``lines[start]``, newline-joined.

    Includes the header, every following line indented deeper than it, and
    blank lines; stops before the first non-blank line at the header's depth
    or shallower.
    """
    depth = indentation(lines[start])
    block = [lines[start]]
    for line in lines[start + 1 :]:
        if line.strip() and indentation(line) <= depth:
            break
        block.append(line)
    return "\n".join(block)


def build_index(
    source: str,
    *,
    dialect: DialectConfig | None = None,
    blocked_params: Collection[str] = (),
) -> Index:
    """Index the top-level definitions of ``source``.

    Args:
        source: Full module text.
        dialect: Keywords of the indexed dialect.
        blocked_params: Parameter names dropped from every parameter list.

    Returns:
        Mapping of top-level name to Definition. Class definitions carry
        their methods in ``children``.
    """
    dialect = dialect or DialectConfig()
    header = _header_start(dialect.def_keyword, dialect.class_keyword)
    lines = source.splitlines()

    index: Index = {}
    methods: dict[str, dict[str, Definition]] = {}
    open_blocks: list[_OpenBlock] = []

    for lineno, line in enumerate(lines):
        if not line.strip():
            continue
        depth = indentation(line)
        while open_blocks and open_blocks[-1].depth >= depth:
            open_blocks.pop()

        match = header.match(line)
        if match is None:
            continue
        keyword, name = match.group("keyword"), match.group("name")

        if depth == 0:
            definition = extract_definition(
                get_block(lines, lineno), dialect=dialect, blocked_params=blocked_params
            )
            index[name] = definition
            methods.pop(name, None)
            if definition.is_degenerate:
                log.debug("index.degenerate", name=name, line=lineno + 1)
            is_class = keyword == dialect.class_keyword and not definition.is_degenerate
            if is_class:
                methods[name] = {}
            open_blocks.append(_OpenBlock(depth, name if is_class else None))
            continue

        owner = open_blocks[-1].class_name if len(open_blocks) == 1 else None
        if owner is not None and keyword == dialect.def_keyword:
            methods[owner][name] = extract_definition(
                get_block(lines, lineno), dialect=dialect, blocked_params=blocked_params
            )
        open_blocks.append(_OpenBlock(depth))

    for name, children in methods.items():
        index[name] = _finish_class(index[name], children, dialect.constructor_name)

    return index


def _finish_class(
    definition: Definition,
    children: dict[str, Definition],
    constructor_name: str,
) -> Definition:
    """Attach methods and promote the constructor's parameters if the class has none."""
    parameters = definition.parameters
    constructor = children.get(constructor_name)
    if not parameters and constructor is not None and constructor.parameters is not None:
        parameters = constructor.parameters
    return replace(definition, children=children, parameters=parameters)
