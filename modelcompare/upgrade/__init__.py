"""Interactive target compatibility-level upgrade."""
from modelcompare.upgrade.negotiator import UpgradeNegotiator, upgrade_needed

__all__ = ["UpgradeNegotiator", "upgrade_needed"]
