"""CLI command implementations exposed via `fontindex.ui.cli`."""

from __future__ import annotations

from .fallbacks import fallbacks
from .families import families, generic
from .query import query


__all__ = ["fallbacks", "families", "generic", "query"]
