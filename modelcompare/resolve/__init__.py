"""Remote discovery of endpoint compatibility facts."""
from modelcompare.resolve.resolver import CompatibilityResolver

__all__ = ["CompatibilityResolver"]
