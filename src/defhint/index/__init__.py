"""Indentation-based definition index."""

from defhint.index.extractor import extract_definition
from defhint.index.indexer import build_index, get_block
from defhint.index.models import Definition, Index, Parameter, index_to_dict
from defhint.index.params import parse_parameters
from defhint.index.store import IndexStore

__all__ = [
    "build_index",
    "get_block",
    "extract_definition",
    "parse_parameters",
    "Definition",
    "Index",
    "IndexStore",
    "Parameter",
    "index_to_dict",
]
