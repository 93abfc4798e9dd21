"""Pydantic model for the compatibility matrix.

The CompatibilityPolicy collects every constant the validation pipeline and
the strategy selector depend on.  The defaults describe the supported
matrix; a JSON file can override them for a deployment::

    policy = CompatibilityPolicy.from_file("policy.json")
"""
from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from modelcompare.errors import DefinitionError, PolicyConfigError
from modelcompare.schema.endpoint import CLOUD_SCHEME

#: Lowest compatibility level accepted for comparison.
MIN_COMPATIBILITY_LEVEL = 1100

#: Highest compatibility level accepted for comparison.
MAX_COMPATIBILITY_LEVEL = 1499

#: Levels at or above this use the structured (tabular) engine.
STRUCTURED_THRESHOLD = 1200

#: Default data-source versions accepted for cloud-hosted datasets.
SUPPORTED_DATA_SOURCE_VERSIONS: tuple[str, ...] = ("PowerBI_V3",)


class CompatibilityPolicy(BaseModel):
    """The compatibility matrix used for one comparison.

    Attributes:
        min_compatibility_level: Inclusive lower bound for both endpoints.
        max_compatibility_level: Inclusive upper bound for both endpoints.
        structured_threshold: Source level selecting the structured engine.
        supported_data_source_versions: Allow-list for cloud datasets.
        cloud_scheme: Address prefix identifying a cloud-hosted dataset.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    min_compatibility_level: int = MIN_COMPATIBILITY_LEVEL
    max_compatibility_level: int = MAX_COMPATIBILITY_LEVEL
    structured_threshold: int = STRUCTURED_THRESHOLD
    supported_data_source_versions: list[str] = Field(
        default_factory=lambda: list(SUPPORTED_DATA_SOURCE_VERSIONS)
    )
    cloud_scheme: str = CLOUD_SCHEME

    @model_validator(mode="after")
    def _check_bounds(self) -> "CompatibilityPolicy":
        if self.min_compatibility_level > self.max_compatibility_level:
            raise PolicyConfigError(
                f"min_compatibility_level={self.min_compatibility_level} is above "
                f"max_compatibility_level={self.max_compatibility_level}."
            )
        if not (
            self.min_compatibility_level
            <= self.structured_threshold
            <= self.max_compatibility_level
        ):
            raise PolicyConfigError(
                f"structured_threshold={self.structured_threshold} lies outside "
                f"[{self.min_compatibility_level}, {self.max_compatibility_level}]."
            )
        return self

    def level_in_range(self, level: int) -> bool:
        return self.min_compatibility_level <= level <= self.max_compatibility_level

    @classmethod
    def from_file(cls, path: str | Path) -> "CompatibilityPolicy":
        """Load a policy from a JSON file.

        Raises:
            DefinitionError: If the file cannot be read or parsed.
            PolicyConfigError: If the values are inconsistent.
        """
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise DefinitionError(
                f"Cannot read compatibility policy '{path}': {exc}", path=str(path)
            ) from exc
        try:
            return cls.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise DefinitionError(
                f"Compatibility policy '{path}' is invalid: {exc}", path=str(path)
            ) from exc
