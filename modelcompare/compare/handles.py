"""Comparison handles: the outcomes of a successful or cancelled build.

A handle is a tagged union over the two comparison-engine variants.  Each
variant is its own frozen dataclass carrying the fields only it needs, so
callers dispatch on ``handle.variant`` (or ``isinstance``) without casting.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from modelcompare.schema.config import ComparisonConfig


class ComparisonVariant(str, Enum):
    """The comparison-engine variant selected for a config."""

    STRUCTURED = "structured"
    DIMENSIONAL = "dimensional"


@dataclass(frozen=True)
class StructuredComparison:
    """Handle for the structured (tabular) comparison engine.

    Attributes:
        config: The final config, including any accepted target upgrade.
        upgraded_from: The target level before an accepted upgrade, or
            ``None`` if the target was not upgraded.
    """

    variant: ClassVar[ComparisonVariant] = ComparisonVariant.STRUCTURED

    config: ComparisonConfig
    upgraded_from: int | None = None

    @property
    def target_upgraded(self) -> bool:
        return self.upgraded_from is not None


@dataclass(frozen=True)
class DimensionalComparison:
    """Handle for the dimensional (cube) comparison engine.

    Attributes:
        config: The validated config.
    """

    variant: ClassVar[ComparisonVariant] = ComparisonVariant.DIMENSIONAL

    config: ComparisonConfig


@dataclass(frozen=True)
class Cancelled:
    """The operator abandoned the comparison during resolution.

    Not an error: check for it before treating a missing handle as a failure.

    Attributes:
        endpoint: Address of the endpoint being prepared when cancelled.
    """

    endpoint: str = ""


Comparison = Union[StructuredComparison, DimensionalComparison]
