"""Comparison factory: the orchestrator in front of the diff engines.

``ComparisonFactory.build`` sequences the whole gate::

    resolve ─► validate ─► select ─► [negotiate upgrade] ─► handle

Each step either passes the config on or ends the build: resolution may
return :class:`~modelcompare.compare.handles.Cancelled`, validation and
negotiation raise
:class:`~modelcompare.errors.ConfigurationIncompatibilityError`, and any
unreachable endpoint raises :class:`~modelcompare.errors.ConnectivityError`.
A handle is only constructed once every step has passed.

Example::

    factory = ComparisonFactory(BimFileConnector(), confirm=console_confirm)
    result = factory.build(load_definition("sales.json"))
    if isinstance(result, Cancelled):
        return
    run_engine(result.variant, result.config)
"""
from __future__ import annotations

import logging

from modelcompare.compare.handles import (
    Cancelled,
    Comparison,
    ComparisonVariant,
    DimensionalComparison,
    StructuredComparison,
)
from modelcompare.compare.selector import select_variant
from modelcompare.connect.base import ModelConnector
from modelcompare.prompt.confirm import Confirm, console_confirm
from modelcompare.resolve.resolver import CompatibilityResolver
from modelcompare.schema.config import ComparisonConfig
from modelcompare.schema.policy import CompatibilityPolicy
from modelcompare.upgrade.negotiator import UpgradeNegotiator, upgrade_needed
from modelcompare.validate.validator import ConfigValidator

logger = logging.getLogger(__name__)


class ComparisonFactory:
    """Builds comparison handles for source/target configs.

    Args:
        connector: Connection layer for discovery and upgrade commits.
        confirm: Operator prompt for interactive configs.  Defaults to
            :func:`~modelcompare.prompt.confirm.console_confirm`.
        policy: Compatibility matrix; defaults to ``CompatibilityPolicy()``.
    """

    def __init__(
        self,
        connector: ModelConnector,
        confirm: Confirm | None = None,
        policy: CompatibilityPolicy | None = None,
    ) -> None:
        self._connector = connector
        self._confirm = confirm or console_confirm
        self._policy = policy or CompatibilityPolicy()
        self._resolver = CompatibilityResolver(connector, self._confirm)
        self._validator = ConfigValidator(self._policy)

    def build(self, config: ComparisonConfig) -> Comparison | Cancelled:
        """Resolve, validate and select the engine for ``config``.

        Args:
            config: The source/target pair.  Its endpoints are populated in
                place; the target level changes if an upgrade is accepted.

        Returns:
            A ``StructuredComparison`` or ``DimensionalComparison`` bound to
            ``config``, or ``Cancelled`` if the operator aborted resolution.

        Raises:
            ConfigurationIncompatibilityError: (or subclass) if the endpoints
                cannot be compared or the upgrade was declined.
            ConnectivityError: If an endpoint cannot be reached.
        """
        # 1. Resolve
        resolved = self._resolver.resolve(config)
        if isinstance(resolved, Cancelled):
            return resolved

        # 2. Validate
        self._validator.validate(config)

        # 3. Select
        source_level, target_level = config.levels
        variant = select_variant(source_level, self._policy.structured_threshold)
        logger.info(
            "Selected %s comparison (source=%s, target=%s)",
            variant.value,
            source_level,
            target_level,
        )

        if variant is ComparisonVariant.DIMENSIONAL:
            return DimensionalComparison(config=config)

        # 4. Negotiate
        upgraded_from: int | None = None
        if upgrade_needed(config, variant):
            if config.interactive:
                negotiator = UpgradeNegotiator(self._connector, self._confirm)
                upgraded_from = negotiator.negotiate(config)
            else:
                # Mixed in-range levels are not rejected outside interactive mode.
                logger.warning(
                    "Source compatibility level %s is above target %s; "
                    "continuing without upgrade in non-interactive mode",
                    source_level,
                    target_level,
                )

        return StructuredComparison(config=config, upgraded_from=upgraded_from)
