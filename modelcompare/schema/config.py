"""The ComparisonConfig model and the comparison definition file loader.

A comparison definition is a JSON document holding the two endpoints::

    {
        "source": {"address": "models/sales_dev.bim"},
        "target": {"address": "powerbi://api.powerbi.com/v1.0/myorg/Sales",
                   "database": "Sales"},
        "interactive": false
    }
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from modelcompare.errors import DefinitionError
from modelcompare.schema.endpoint import EndpointDescriptor


class ComparisonConfig(BaseModel):
    """A source/target pair to be compared.

    A config is consumed by exactly one
    :meth:`~modelcompare.compare.factory.ComparisonFactory.build` call at a
    time.  The only field this package mutates is
    ``target.compatibility_level``, during an accepted upgrade.

    Attributes:
        source: The endpoint changes are read from.
        target: The endpoint changes would be applied to.
        interactive: Allow operator prompts (cancellation during resolution
            and the target upgrade offer).
    """

    model_config = ConfigDict(extra="forbid")

    source: EndpointDescriptor
    target: EndpointDescriptor
    interactive: bool = False

    @property
    def levels(self) -> tuple[int | None, int | None]:
        """Returns ``(source_level, target_level)``."""
        return self.source.compatibility_level, self.target.compatibility_level


def load_definition(path: str | Path) -> ComparisonConfig:
    """Load a :class:`ComparisonConfig` from a JSON comparison definition.

    Relative ``address`` values are kept as written; the connector decides
    how to interpret them.

    Args:
        path: Path to the definition file.

    Returns:
        The parsed, unresolved ``ComparisonConfig``.

    Raises:
        DefinitionError: If the file cannot be read or is not a valid
            definition.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DefinitionError(
            f"Cannot read comparison definition '{path}': {exc}", path=str(path)
        ) from exc

    try:
        return ComparisonConfig.model_validate_json(raw)
    except PydanticValidationError as exc:
        raise DefinitionError(
            f"Comparison definition '{path}' is invalid: {exc}", path=str(path)
        ) from exc
