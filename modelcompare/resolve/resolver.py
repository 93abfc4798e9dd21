"""Compatibility resolution.

``CompatibilityResolver`` runs before validation.  It prepares and discovers
the source, then the target, copying the discovered facts onto each
:class:`~modelcompare.schema.endpoint.EndpointDescriptor`.

In interactive mode the connector may ask the operator before preparing an
endpoint; declining yields a :class:`~modelcompare.compare.handles.Cancelled`
outcome and nothing further is touched.  In non-interactive mode no prompt is
offered and a connector that refuses to prepare is a connectivity failure.
"""
from __future__ import annotations

import logging

from modelcompare.compare.handles import Cancelled
from modelcompare.connect.base import ModelConnector
from modelcompare.errors import ConnectivityError
from modelcompare.prompt.confirm import Confirm
from modelcompare.schema.config import ComparisonConfig
from modelcompare.schema.endpoint import EndpointDescriptor

logger = logging.getLogger(__name__)


class CompatibilityResolver:
    """Populates compatibility facts on both endpoints of a config.

    Args:
        connector: Connection layer used for preparation and discovery.
        confirm: Operator prompt used in interactive mode only.
    """

    def __init__(self, connector: ModelConnector, confirm: Confirm | None = None) -> None:
        self._connector = connector
        self._confirm = confirm

    def resolve(self, config: ComparisonConfig) -> ComparisonConfig | Cancelled:
        """Discover both endpoints of ``config`` in place.

        Returns:
            ``config`` itself once both endpoints are populated, or
            ``Cancelled`` if the operator aborted.

        Raises:
            ConnectivityError: If an endpoint cannot be reached.
        """
        confirm = self._confirm if config.interactive else None

        for role, endpoint in (("source", config.source), ("target", config.target)):
            if not self._connector.prepare(endpoint, confirm):
                if confirm is None:
                    raise ConnectivityError(
                        f"{role.capitalize()} endpoint {endpoint.describe()} "
                        "could not be prepared for discovery.",
                        address=endpoint.address,
                    )
                logger.info("Comparison cancelled while preparing %s", endpoint.describe())
                return Cancelled(endpoint=endpoint.address)
            self._discover(role, endpoint)

        return config

    def _discover(self, role: str, endpoint: EndpointDescriptor) -> None:
        metadata = self._connector.discover(endpoint)
        endpoint.apply(metadata)
        logger.debug(
            "Resolved %s %s: compatibility_level=%s data_source_version=%s direct_query=%s",
            role,
            endpoint.describe(),
            endpoint.compatibility_level,
            endpoint.data_source_version,
            endpoint.direct_query,
        )
