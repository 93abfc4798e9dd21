"""Custom exception hierarchy for modelcompare.

All public errors inherit from ModelCompareError so callers can catch the
base class for any modelcompare-specific failure.  Operator cancellation is
not an error; it is reported as a
:class:`~modelcompare.compare.handles.Cancelled` outcome.
"""
from __future__ import annotations

from typing import Any


class ModelCompareError(Exception):
    """Base exception for all modelcompare errors."""


class DefinitionError(ModelCompareError):
    """Raised when a comparison definition or policy file cannot be loaded.

    Args:
        message: Human-readable description.
        path: The file that failed to load.
    """

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class PolicyConfigError(ModelCompareError):
    """Raised when a CompatibilityPolicy is internally inconsistent."""


class ConfigurationIncompatibilityError(ModelCompareError):
    """Raised when source and target cannot be compared with each other.

    Args:
        message: Human-readable description embedding the offending values.
        code: Machine-readable error code (e.g. DIRECT_QUERY_MISMATCH).
        details: The offending field values.
    """

    def __init__(
        self,
        message: str,
        code: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.details: dict[str, Any] = details or {}

    def to_error_response(self) -> dict[str, Any]:
        """Returns a structured error response for callers that render it."""
        return {
            "error": self.code,
            "message": str(self),
            "details": self.details,
        }


class UnresolvedEndpointError(ConfigurationIncompatibilityError):
    """Raised when an endpoint's compatibility level was never discovered."""

    def __init__(self, role: str) -> None:
        super().__init__(
            f"{role.capitalize()} compatibility level has not been resolved.",
            code="UNRESOLVED_ENDPOINT",
            details={"role": role},
        )


class DirectQueryMismatchError(ConfigurationIncompatibilityError):
    """Raised when source and target disagree on DirectQuery mode."""

    def __init__(self, source: bool, target: bool) -> None:
        super().__init__(
            "Mixed DirectQuery settings are not supported.\n"
            f"Source is {_on_off(source)} and target is {_on_off(target)}.",
            code="DIRECT_QUERY_MISMATCH",
            details={"source_direct_query": source, "target_direct_query": target},
        )


class UnsupportedDataSourceVersionError(ConfigurationIncompatibilityError):
    """Raised when a cloud-hosted dataset uses an unsupported metadata format."""

    def __init__(
        self,
        role: str,
        version: str | None,
        supported_versions: list[str],
    ) -> None:
        super().__init__(
            f"{role.capitalize()} model is a Power BI dataset with default "
            "data-source version (basically the dataset metadata format) of "
            f"{version}, which is not supported for comparison.",
            code="UNSUPPORTED_DATA_SOURCE_VERSION",
            details={
                "role": role,
                "data_source_version": version,
                "supported_versions": supported_versions,
            },
        )
        self.role = role


class MixedCompatibilityLevelsError(ConfigurationIncompatibilityError):
    """Raised for out-of-range levels or a declined target upgrade."""

    def __init__(self, source_level: int, target_level: int) -> None:
        super().__init__(
            "This combination of mixed compatibility levels is not supported.\n"
            f"Source is {source_level} and target is {target_level}.",
            code="MIXED_COMPATIBILITY_LEVELS",
            details={"source_level": source_level, "target_level": target_level},
        )


class ConnectivityError(ModelCompareError):
    """Raised when discovery or an upgrade commit cannot reach an endpoint.

    The underlying cause from the connection layer is chained via
    ``raise ... from exc`` and left untouched.

    Args:
        message: Human-readable description.
        address: The endpoint address that could not be reached.
    """

    def __init__(self, message: str, address: str | None = None) -> None:
        super().__init__(message)
        self.address = address


def _on_off(flag: bool) -> str:
    return "On" if flag else "Off"
