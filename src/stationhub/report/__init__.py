"""Report templates other than the HOTO engine."""

from __future__ import annotations

__all__ = ["model", "ohca"]
