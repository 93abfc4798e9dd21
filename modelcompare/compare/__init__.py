"""Comparison handles and engine-variant selection.

The orchestrating :class:`~modelcompare.compare.factory.ComparisonFactory`
is imported from its own module (or from the package root).
"""
from modelcompare.compare.handles import (
    Cancelled,
    Comparison,
    ComparisonVariant,
    DimensionalComparison,
    StructuredComparison,
)
from modelcompare.compare.selector import select_variant

__all__ = [
    "Cancelled",
    "Comparison",
    "ComparisonVariant",
    "DimensionalComparison",
    "StructuredComparison",
    "select_variant",
]
