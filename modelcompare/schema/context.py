"""Validation context value object.

Packages the ``(config, policy)`` pair threaded through every check of the
validation pipeline into a single object.
"""

from __future__ import annotations

from dataclasses import dataclass

from modelcompare.schema.config import ComparisonConfig
from modelcompare.schema.policy import CompatibilityPolicy


@dataclass(frozen=True)
class ValidationContext:
    """Immutable context for a single validation run.

    Attributes:
        config: The resolved source/target pair under validation.
        policy: The compatibility matrix to validate against.
    """

    config: ComparisonConfig
    policy: CompatibilityPolicy
