"""Test doubles: a scripted connector and a scripted confirm port."""
from __future__ import annotations

from dataclasses import dataclass, field

from modelcompare.connect.base import ModelConnector
from modelcompare.errors import ConnectivityError
from modelcompare.schema.config import ComparisonConfig
from modelcompare.schema.endpoint import EndpointDescriptor, EndpointMetadata

SOURCE = "asazure://westeurope.asazure.windows.net/dev"
TARGET = "asazure://westeurope.asazure.windows.net/prod"
PBI_SOURCE = "powerbi://api.powerbi.com/v1.0/myorg/Dev"
PBI_TARGET = "powerbi://api.powerbi.com/v1.0/myorg/Prod"


class ScriptedConnector(ModelConnector):
    """In-memory connector serving metadata keyed by endpoint address.

    Args:
        metadata: Address -> metadata returned by ``discover``.
        prepare_answers: Address -> value returned by ``prepare``
            (default ``True``).
        unreachable: Addresses for which every call raises ConnectivityError.
    """

    def __init__(
        self,
        metadata: dict[str, EndpointMetadata],
        prepare_answers: dict[str, bool] | None = None,
        unreachable: set[str] | None = None,
    ) -> None:
        self.metadata = dict(metadata)
        self.prepare_answers = prepare_answers or {}
        self.unreachable = unreachable or set()
        self.prepared: list[tuple[str, bool]] = []
        self.discovered: list[str] = []
        self.commits: list[tuple[str, int]] = []

    def prepare(self, endpoint, confirm):
        self.prepared.append((endpoint.address, confirm is not None))
        return self.prepare_answers.get(endpoint.address, True)

    def discover(self, endpoint):
        self._check(endpoint)
        self.discovered.append(endpoint.address)
        return self.metadata[endpoint.address]

    def commit_compatibility_level(self, endpoint, level):
        self._check(endpoint)
        self.commits.append((endpoint.address, level))
        current = self.metadata[endpoint.address]
        self.metadata[endpoint.address] = current.model_copy(
            update={"compatibility_level": level}
        )

    def _check(self, endpoint) -> None:
        if endpoint.address in self.unreachable:
            raise ConnectivityError(
                f"Cannot connect to {endpoint.address}.", address=endpoint.address
            )


@dataclass
class ScriptedConfirm:
    """Confirm port answering from a fixed list and recording the questions."""

    answers: list[bool] = field(default_factory=list)
    questions: list[str] = field(default_factory=list)

    def __call__(self, question: str) -> bool:
        self.questions.append(question)
        return self.answers.pop(0) if self.answers else False


def make_connector(
    source_level: int,
    target_level: int,
    source_dq: bool = False,
    target_dq: bool = False,
    source: str = SOURCE,
    target: str = TARGET,
    source_version: str | None = None,
    target_version: str | None = None,
    **kwargs,
) -> ScriptedConnector:
    return ScriptedConnector(
        {
            source: EndpointMetadata(
                compatibility_level=source_level,
                data_source_version=source_version,
                direct_query=source_dq,
            ),
            target: EndpointMetadata(
                compatibility_level=target_level,
                data_source_version=target_version,
                direct_query=target_dq,
            ),
        },
        **kwargs,
    )


def make_config(
    source: str = SOURCE, target: str = TARGET, interactive: bool = False
) -> ComparisonConfig:
    return ComparisonConfig(
        source=EndpointDescriptor(address=source, database="Sales"),
        target=EndpointDescriptor(address=target, database="Sales"),
        interactive=interactive,
    )
