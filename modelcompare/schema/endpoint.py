"""Pydantic models describing one side of a comparison.

An :class:`EndpointDescriptor` starts out holding only what the caller knows
(address, database, DirectQuery mode).  The compatibility level and the
data-source version are filled in by
:class:`~modelcompare.resolve.resolver.CompatibilityResolver` from the
:class:`EndpointMetadata` a connector discovers.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict

#: Connection scheme identifying a cloud-hosted (Power BI) dataset.
CLOUD_SCHEME = "powerbi://"


class EndpointMetadata(BaseModel):
    """Facts read from a live endpoint during discovery.

    Attributes:
        compatibility_level: The endpoint's compatibility level.
        data_source_version: Default data-source version, or ``None`` when the
            endpoint does not report one.
        direct_query: DirectQuery mode reported by the endpoint, or ``None``
            to keep the descriptor's configured value.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    compatibility_level: int
    data_source_version: str | None = None
    direct_query: bool | None = None


class EndpointDescriptor(BaseModel):
    """Identifies one model endpoint.

    Attributes:
        address: Opaque connection identifier (server URI or file path).
        database: Database or dataset name at ``address``.
        compatibility_level: Populated only after resolution.
        data_source_version: Populated only after resolution; only
            meaningful for cloud-hosted endpoints.
        direct_query: Query-execution mode.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    address: str
    database: str = ""
    compatibility_level: int | None = None
    data_source_version: str | None = None
    direct_query: bool = False

    def is_cloud_dataset(self, scheme: str = CLOUD_SCHEME) -> bool:
        """Returns whether the address uses the cloud dataset scheme."""
        return self.address.startswith(scheme)

    @property
    def is_resolved(self) -> bool:
        return self.compatibility_level is not None

    def apply(self, metadata: EndpointMetadata) -> None:
        """Copy discovered ``metadata`` onto this descriptor."""
        self.compatibility_level = metadata.compatibility_level
        self.data_source_version = metadata.data_source_version
        if metadata.direct_query is not None:
            self.direct_query = metadata.direct_query

    def describe(self) -> str:
        """Returns ``address/database`` for log and error messages."""
        if self.database:
            return f"{self.address}/{self.database}"
        return self.address
