"""modelcompare schema models: endpoints, comparison config, policy."""
from modelcompare.schema.config import ComparisonConfig, load_definition
from modelcompare.schema.context import ValidationContext
from modelcompare.schema.endpoint import CLOUD_SCHEME, EndpointDescriptor, EndpointMetadata
from modelcompare.schema.policy import CompatibilityPolicy

__all__ = [
    "CLOUD_SCHEME",
    "ComparisonConfig",
    "CompatibilityPolicy",
    "EndpointDescriptor",
    "EndpointMetadata",
    "ValidationContext",
    "load_definition",
]
