"""Comparison config validation orchestrator.

``ConfigValidator`` is the public entry point.  It wires together the
focused sub-validators and drives them in a fixed order, stopping at the
first violation.

Sub-validator hierarchy
-----------------------
ConfigValidator
  ├── VersionValidator      (version_validator.py) : resolution, data-source
  │                                                  versions, level range
  └── DirectQueryValidator  (mode_validator.py)    : query-mode parity
"""
from __future__ import annotations

import logging

from modelcompare.errors import ConfigurationIncompatibilityError
from modelcompare.schema.config import ComparisonConfig
from modelcompare.schema.context import ValidationContext
from modelcompare.schema.policy import CompatibilityPolicy
from modelcompare.validate.mode_validator import DirectQueryValidator
from modelcompare.validate.version_validator import VersionValidator

logger = logging.getLogger(__name__)


class ConfigValidator:
    """Validates a resolved ComparisonConfig against a CompatibilityPolicy.

    Checks run in this order:
    0. Both compatibility levels resolved.
    1. DirectQuery parity.
    2. Source cloud dataset data-source version.
    3. Target cloud dataset data-source version.
    4. Both compatibility levels within the supported range.

    Only the first violation is raised, even if several hold.

    Args:
        policy: The compatibility matrix; defaults to ``CompatibilityPolicy()``.
    """

    def __init__(self, policy: CompatibilityPolicy | None = None) -> None:
        self._policy = policy or CompatibilityPolicy()

    def validate(self, config: ComparisonConfig) -> None:
        """Validate ``config`` and raise on the first violation found.

        Raises:
            ConfigurationIncompatibilityError: (or subclass) on the first
                violation.
        """
        ctx = ValidationContext(config=config, policy=self._policy)
        versions = VersionValidator(ctx)

        try:
            versions.validate_resolved()
            DirectQueryValidator(ctx).validate_parity()
            versions.validate_data_source_version("source")
            versions.validate_data_source_version("target")
            versions.validate_level_range()
        except ConfigurationIncompatibilityError as exc:
            logger.info("Comparison rejected (%s): %s", exc.code, exc)
            raise

        logger.debug(
            "Comparison config valid: source=%s target=%s",
            config.source.compatibility_level,
            config.target.compatibility_level,
        )
