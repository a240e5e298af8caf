"""Interactive SSH launcher driven by a YAML project/server menu."""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.3.0"
