"""Connector for offline model definitions stored as ``.bim`` files.

A ``.bim`` file is the JSON serialization of a tabular database.  The facts
discovery needs sit at fixed places in it::

    {
        "name": "Sales",
        "compatibilityLevel": 1400,
        "model": {
            "defaultMode": "directQuery",
            "defaultPowerBIDataSourceVersion": "PowerBI_V3",
            ...
        }
    }

The endpoint ``address`` is the file path, resolved against ``base_dir``
when relative.  An upgrade rewrites ``compatibilityLevel`` in place.

Example::

    connector = BimFileConnector(base_dir=Path("models"))
    metadata = connector.discover(EndpointDescriptor(address="sales.bim"))
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from modelcompare.connect.base import ModelConnector
from modelcompare.errors import ConnectivityError
from modelcompare.schema.endpoint import EndpointDescriptor, EndpointMetadata

logger = logging.getLogger(__name__)

_DIRECT_QUERY_MODE = "directquery"


class BimFileConnector(ModelConnector):
    """Reads and upgrades ``.bim`` model files.

    Args:
        base_dir: Directory relative addresses are resolved against.
            Defaults to the current working directory.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self._base_dir = Path(base_dir) if base_dir is not None else None

    def path_for(self, endpoint: EndpointDescriptor) -> Path:
        path = Path(endpoint.address)
        if self._base_dir is not None and not path.is_absolute():
            path = self._base_dir / path
        return path

    def discover(self, endpoint: EndpointDescriptor) -> EndpointMetadata:
        path = self.path_for(endpoint)
        document = self._read(path)

        level = document.get("compatibilityLevel")
        if not isinstance(level, int) or isinstance(level, bool):
            raise ConnectivityError(
                f"Model file '{path}' has no integer compatibilityLevel.",
                address=endpoint.address,
            )
        model = document.get("model") or {}
        if not isinstance(model, dict):
            raise ConnectivityError(
                f"Model file '{path}' does not contain a model object.",
                address=endpoint.address,
            )
        mode = str(model.get("defaultMode", "")).lower()

        try:
            metadata = EndpointMetadata(
                compatibility_level=level,
                data_source_version=model.get("defaultPowerBIDataSourceVersion"),
                direct_query=mode == _DIRECT_QUERY_MODE,
            )
        except PydanticValidationError as exc:
            raise ConnectivityError(
                f"Model file '{path}' has invalid model metadata: {exc}",
                address=endpoint.address,
            ) from exc
        logger.debug("Discovered %s: %s", path, metadata)
        return metadata

    def commit_compatibility_level(
        self, endpoint: EndpointDescriptor, level: int
    ) -> None:
        path = self.path_for(endpoint)
        document = self._read(path)
        document["compatibilityLevel"] = level
        self._write(path, document)
        logger.info("Set compatibilityLevel=%s in %s", level, path)

    # ------------------------------------------------------------------
    # File helpers
    # ------------------------------------------------------------------

    def _read(self, path: Path) -> dict[str, Any]:
        try:
            document = json.loads(path.read_text(encoding="utf-8-sig"))
        except OSError as exc:
            raise ConnectivityError(
                f"Cannot open model file '{path}': {exc}", address=str(path)
            ) from exc
        except json.JSONDecodeError as exc:
            raise ConnectivityError(
                f"Model file '{path}' is not valid JSON: {exc}", address=str(path)
            ) from exc
        if not isinstance(document, dict):
            raise ConnectivityError(
                f"Model file '{path}' does not contain a database object.",
                address=str(path),
            )
        return document

    def _write(self, path: Path, document: dict[str, Any]) -> None:
        # Replace atomically so a failed write never leaves a truncated model.
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(document, fh, indent=2)
                fh.write("\n")
            os.replace(tmp_name, path)
        except OSError as exc:
            if tmp_name is not None:
                Path(tmp_name).unlink(missing_ok=True)
            raise ConnectivityError(
                f"Cannot write model file '{path}': {exc}", address=str(path)
            ) from exc
