"""Version validator.

Validates the two version tags every endpoint carries once resolved: the
compatibility level (range check) and, for cloud-hosted datasets, the
default data-source version (allow-list check).
"""

from __future__ import annotations

from typing import Literal

from modelcompare.errors import (
    MixedCompatibilityLevelsError,
    UnresolvedEndpointError,
    UnsupportedDataSourceVersionError,
)
from modelcompare.schema.context import ValidationContext
from modelcompare.schema.endpoint import EndpointDescriptor

Role = Literal["source", "target"]


class VersionValidator:
    """Validates compatibility levels and data-source versions.

    Args:
        ctx: Validation context (config + policy).
    """

    def __init__(self, ctx: ValidationContext) -> None:
        self._ctx = ctx

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def validate_resolved(self) -> None:
        """Raise if either compatibility level was never discovered.

        Raises:
            UnresolvedEndpointError: Naming the unresolved side.
        """
        for role in ("source", "target"):
            if not self._endpoint(role).is_resolved:
                raise UnresolvedEndpointError(role)

    def validate_data_source_version(self, role: Role) -> None:
        """Raise if a cloud-hosted endpoint uses an unsupported format.

        Non-cloud endpoints are skipped; their data-source version is not
        meaningful.

        Raises:
            UnsupportedDataSourceVersionError: Naming ``role`` and the version.
        """
        policy = self._ctx.policy
        endpoint = self._endpoint(role)
        if not endpoint.is_cloud_dataset(policy.cloud_scheme):
            return
        if endpoint.data_source_version not in policy.supported_data_source_versions:
            raise UnsupportedDataSourceVersionError(
                role,
                endpoint.data_source_version,
                list(policy.supported_data_source_versions),
            )

    def validate_level_range(self) -> None:
        """Raise unless both compatibility levels lie in the supported range.

        Each side is checked independently.  Two different levels that are
        both in range pass.

        Raises:
            MixedCompatibilityLevelsError: Carrying both levels.
        """
        policy = self._ctx.policy
        source_level, target_level = self._ctx.config.levels
        if not (
            policy.level_in_range(source_level) and policy.level_in_range(target_level)
        ):
            raise MixedCompatibilityLevelsError(source_level, target_level)

    def _endpoint(self, role: str) -> EndpointDescriptor:
        config = self._ctx.config
        return config.source if role == "source" else config.target
