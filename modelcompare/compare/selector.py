"""Strategy selector: compatibility level to comparison-engine variant."""
from __future__ import annotations

from modelcompare.compare.handles import ComparisonVariant
from modelcompare.schema.policy import STRUCTURED_THRESHOLD


def select_variant(
    source_level: int, threshold: int = STRUCTURED_THRESHOLD
) -> ComparisonVariant:
    """Return the engine variant for a source compatibility level.

    Only the source level matters; the target is validated separately.

    Args:
        source_level: The resolved source compatibility level.
        threshold: Lowest level handled by the structured engine.

    Returns:
        ``STRUCTURED`` for ``source_level >= threshold``, else ``DIMENSIONAL``.
    """
    if source_level >= threshold:
        return ComparisonVariant.STRUCTURED
    return ComparisonVariant.DIMENSIONAL
