"""modelcompare – the compatibility gate in front of a model diff engine.

Decides whether a source and a target analytical model can be compared and
which comparison engine variant must do it.

Public API
----------
``create_comparison``
    Resolve, validate and select the engine for a ``ComparisonConfig``.

``create_comparison_from_file``
    Same, starting from a JSON comparison definition file.

Re-exported types
-----------------
``ComparisonConfig``, ``EndpointDescriptor``, ``CompatibilityPolicy``, the
comparison handles, ``ModelConnector`` and all error classes.

Extensibility
-------------
New endpoint kinds are supported by subclassing ``ModelConnector``::

    class XmlaConnector(ModelConnector):
        def discover(self, endpoint): ...
        def commit_compatibility_level(self, endpoint, level): ...

    result = modelcompare.create_comparison(config, XmlaConnector())
"""

from __future__ import annotations

from pathlib import Path

from modelcompare.compare.factory import ComparisonFactory
from modelcompare.compare.handles import (
    Cancelled,
    Comparison,
    ComparisonVariant,
    DimensionalComparison,
    StructuredComparison,
)
from modelcompare.compare.selector import select_variant
from modelcompare.connect.base import ModelConnector
from modelcompare.connect.bim_file import BimFileConnector
from modelcompare.errors import (
    ConfigurationIncompatibilityError,
    ConnectivityError,
    DefinitionError,
    DirectQueryMismatchError,
    MixedCompatibilityLevelsError,
    ModelCompareError,
    PolicyConfigError,
    UnresolvedEndpointError,
    UnsupportedDataSourceVersionError,
)
from modelcompare.prompt.confirm import Confirm, console_confirm
from modelcompare.schema.config import ComparisonConfig, load_definition
from modelcompare.schema.endpoint import EndpointDescriptor, EndpointMetadata
from modelcompare.schema.policy import CompatibilityPolicy
from modelcompare.validate.validator import ConfigValidator

__version__ = "0.1.0"

__all__ = [
    # Core pipeline
    "create_comparison",
    "create_comparison_from_file",
    "ComparisonFactory",
    "ConfigValidator",
    "select_variant",
    # Schema types
    "ComparisonConfig",
    "EndpointDescriptor",
    "EndpointMetadata",
    "CompatibilityPolicy",
    "load_definition",
    # Handles
    "Comparison",
    "ComparisonVariant",
    "StructuredComparison",
    "DimensionalComparison",
    "Cancelled",
    # Connectors and prompts
    "ModelConnector",
    "BimFileConnector",
    "Confirm",
    "console_confirm",
    # Errors
    "ModelCompareError",
    "DefinitionError",
    "PolicyConfigError",
    "ConfigurationIncompatibilityError",
    "UnresolvedEndpointError",
    "DirectQueryMismatchError",
    "UnsupportedDataSourceVersionError",
    "MixedCompatibilityLevelsError",
    "ConnectivityError",
]


def create_comparison(
    config: ComparisonConfig,
    connector: ModelConnector,
    *,
    interactive: bool | None = None,
    confirm: Confirm | None = None,
    policy: CompatibilityPolicy | None = None,
) -> Comparison | Cancelled:
    """Resolve, validate and select the comparison engine for ``config``.

    This is the main entry point::

        result = modelcompare.create_comparison(
            config, BimFileConnector(), interactive=True
        )
        if isinstance(result, modelcompare.Cancelled):
            return
        engine = ENGINES[result.variant](result.config)

    Args:
        config: The source/target pair; its endpoints are populated in place.
        connector: Connection layer for discovery and upgrade commits.
        interactive: Overrides ``config.interactive`` for this build only;
            the caller's config keeps its own flag.
        confirm: Operator prompt; defaults to a console prompt.
        policy: Optional compatibility matrix; defaults to
            ``CompatibilityPolicy()``.

    Returns:
        ``StructuredComparison``, ``DimensionalComparison`` or ``Cancelled``.

    Raises:
        ConfigurationIncompatibilityError: (or subclass) if the models cannot
            be compared.
        ConnectivityError: If an endpoint cannot be reached.
    """
    if interactive is not None:
        config = config.model_copy(update={"interactive": interactive})
    return ComparisonFactory(connector, confirm, policy).build(config)


def create_comparison_from_file(
    path: str | Path,
    connector: ModelConnector | None = None,
    *,
    confirm: Confirm | None = None,
    policy: CompatibilityPolicy | None = None,
) -> Comparison | Cancelled:
    """Load a comparison definition file and build its comparison.

    Args:
        path: JSON comparison definition.
        connector: Connection layer; defaults to a ``BimFileConnector``
            resolving model paths relative to the definition file.
        confirm: Operator prompt; defaults to a console prompt.
        policy: Optional compatibility matrix.

    Raises:
        DefinitionError: If the definition cannot be loaded.
        ConfigurationIncompatibilityError: (or subclass) if the models cannot
            be compared.
        ConnectivityError: If an endpoint cannot be reached.
    """
    config = load_definition(path)
    if connector is None:
        connector = BimFileConnector(base_dir=Path(path).parent)
    return ComparisonFactory(connector, confirm, policy).build(config)
