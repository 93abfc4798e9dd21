"""Fail-fast compatibility checks over a resolved ComparisonConfig."""
from modelcompare.validate.validator import ConfigValidator

__all__ = ["ConfigValidator"]
