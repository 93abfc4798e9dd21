"""Shared pytest fixtures for modelcompare tests."""
from __future__ import annotations

from pathlib import Path

import pytest

from tests.fixtures import copy_models


@pytest.fixture()
def models_dir(tmp_path: Path) -> Path:
    """A temporary directory holding writable copies of the sample models."""
    return copy_models(tmp_path)
