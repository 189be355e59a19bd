"""Configuration constants.

Default values shared by the config models and the indexer. For configurable
values, see models.py.
"""

# =============================================================================
# Dialect
# =============================================================================

DEFAULT_DEF_KEYWORD = "def"
"""Keyword that introduces a callable definition."""

DEFAULT_CLASS_KEYWORD = "class"
"""Keyword that introduces a class definition."""

DEFAULT_CONSTRUCTOR_NAME = "__init__"
"""Method whose parameters a parameterless class adopts."""

# =============================================================================
# Source discovery
# =============================================================================

DEFAULT_LIBRARY_DIR = "cslib"
"""Directory searched for in the ancestors of the edited file."""

DEFAULT_ENTRY_FILE = "main.py"
"""Module inside the library directory that gets indexed."""

CONFIG_DIR_NAME = ".defhint"
"""Per-library config directory, next to the library directory."""

# =============================================================================
# Hints
# =============================================================================

DEFAULT_BLOCKED_PARAMS = ("self",)
"""Parameter names dropped unless configured otherwise."""

QUOTE_CHARS = "\"'"
"""Characters that open a string literal in parameter defaults."""
