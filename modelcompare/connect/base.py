"""Connector abstraction: the port to the external connection layer.

The comparison core never opens sessions itself.  A :class:`ModelConnector`
performs the three remote operations it needs:

- ``prepare``: bring an endpoint into a connectable state (e.g. wake a
  workspace instance), possibly asking the operator first.
- ``discover``: read the endpoint's compatibility level, data-source version
  and DirectQuery mode.
- ``commit_compatibility_level``: persist a new compatibility level on the
  endpoint and release the connection used for it.

Implementations raise :class:`~modelcompare.errors.ConnectivityError` for
anything that prevents reaching the endpoint.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from modelcompare.prompt.confirm import Confirm
from modelcompare.schema.endpoint import EndpointDescriptor, EndpointMetadata


class ModelConnector(ABC):
    """Abstract base for endpoint connectors."""

    def prepare(self, endpoint: EndpointDescriptor, confirm: Confirm | None) -> bool:
        """Make ``endpoint`` ready for discovery.

        Args:
            endpoint: The endpoint about to be discovered.
            confirm: Operator prompt, or ``None`` when running
                non-interactively (the connector must not prompt then).

        Returns:
            ``False`` if the operator declined to continue, else ``True``.
        """
        return True

    @abstractmethod
    def discover(self, endpoint: EndpointDescriptor) -> EndpointMetadata:
        """Read version facts from the live endpoint.

        Raises:
            ConnectivityError: If the endpoint cannot be reached.
        """

    @abstractmethod
    def commit_compatibility_level(
        self, endpoint: EndpointDescriptor, level: int
    ) -> None:
        """Set and commit the endpoint's persisted compatibility level.

        Raises:
            ConnectivityError: If the endpoint cannot be reached or the
                commit fails.
        """
