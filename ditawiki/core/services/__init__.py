from __future__ import annotations

"""High-level orchestration services (corpus conversion, page output)."""

from .conversion_service import ConversionReport, ConversionService  # noqa: F401

__all__: list[str] = [
    "ConversionReport",
    "ConversionService",
]
