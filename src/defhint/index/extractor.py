"""Definition extraction from a single indentation block."""

from __future__ import annotations

import re
from collections.abc import Collection
from functools import lru_cache

from defhint.config.models import DialectConfig
from defhint.index.models import Definition
from defhint.index.params import parse_parameters

_DOCSTRING = re.compile(r"('''|\"\"\")(.*?)\1", re.DOTALL)


@lru_cache(maxsize=8)
def _header_pattern(def_keyword: str, class_keyword: str) -> re.Pattern[str]:
    # Only the first line can match: '.' stops at newlines, so a parameter
    # list spanning several lines leaves the definition degenerate.
    return re.compile(
        rf"^(?:(?P<def>{re.escape(def_keyword)})\s+(?P<def_name>\w+)\s*\((?P<def_params>.*)\)"
        rf"|(?P<cls>{re.escape(class_keyword)})\s+(?P<cls_name>\w+)\s*(?:\((?P<cls_params>.*)\))?\s*:)"
    )


def extract_definition(
    block: str,
    *,
    dialect: DialectConfig | None = None,
    blocked_params: Collection[str] = (),
) -> Definition:
    """Build a Definition from a block whose first line is its header.

    Returns a degenerate Definition (raw source only) when the header does
    not match ``<keyword> <name>(<params>)``.
    """
    dialect = dialect or DialectConfig()
    source = block.strip()

    match = _header_pattern(dialect.def_keyword, dialect.class_keyword).match(source)
    if match is None:
        return Definition.degenerate(source)

    if match.group("def"):
        kind, keyword = "func", dialect.def_keyword
        name, params_text = match.group("def_name"), match.group("def_params")
    else:
        kind, keyword = "class", dialect.class_keyword
        name, params_text = match.group("cls_name"), match.group("cls_params") or ""

    doc = _DOCSTRING.search(source)
    return Definition(
        raw_source=source,
        name=name,
        kind=kind,
        keyword=keyword,
        description=doc.group(2) if doc else "",
        parameters=parse_parameters(params_text, blocked_params),
        children={} if kind == "class" else None,
    )
