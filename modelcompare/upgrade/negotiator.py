"""Target upgrade negotiation.

When the structured engine is selected and the source compatibility level is
above the target's, the operator is offered to raise the target to the
source level.  This is the only point where the comparison core changes
remote state.
"""
from __future__ import annotations

import logging

from modelcompare.compare.handles import ComparisonVariant
from modelcompare.connect.base import ModelConnector
from modelcompare.errors import MixedCompatibilityLevelsError
from modelcompare.prompt.confirm import Confirm, upgrade_prompt
from modelcompare.schema.config import ComparisonConfig

logger = logging.getLogger(__name__)


def upgrade_needed(config: ComparisonConfig, variant: ComparisonVariant) -> bool:
    """Return whether ``config`` qualifies for the target upgrade offer."""
    source_level, target_level = config.levels
    return variant is ComparisonVariant.STRUCTURED and source_level > target_level


class UpgradeNegotiator:
    """Offers and performs the target compatibility-level upgrade.

    Args:
        connector: Connection layer used to commit the new level.
        confirm: Operator prompt.
    """

    def __init__(self, connector: ModelConnector, confirm: Confirm) -> None:
        self._connector = connector
        self._confirm = confirm

    def negotiate(self, config: ComparisonConfig) -> int:
        """Ask the operator and upgrade the target on acceptance.

        Returns:
            The target's compatibility level before the upgrade.

        Raises:
            MixedCompatibilityLevelsError: If the operator declines.
            ConnectivityError: If the commit cannot reach the target.
        """
        source_level, target_level = config.levels

        if not self._confirm(upgrade_prompt(source_level, target_level)):
            logger.info(
                "Target upgrade from %s to %s declined", target_level, source_level
            )
            raise MixedCompatibilityLevelsError(source_level, target_level)

        self._connector.commit_compatibility_level(config.target, source_level)
        config.target.compatibility_level = source_level
        logger.info(
            "Upgraded target %s from compatibility level %s to %s",
            config.target.describe(),
            target_level,
            source_level,
        )
        return target_level
