"""defhint - lightweight definition index with hover and completion queries."""

__version__ = "0.1.0"
