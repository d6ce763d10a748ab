"""
Analyzer module.

Contains type resolution, base type classification and union
variant analysis.
"""

from __future__ import annotations

from .type_registry import TypeRegistry
from .variant_classes import TokenShape, Variant, VariantClasses, classify_variants, token_shape

__all__ = [
    "TypeRegistry",
    "TokenShape",
    "Variant",
    "VariantClasses",
    "classify_variants",
    "token_shape",
]
