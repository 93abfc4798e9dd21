"""Test fixtures: sample ``.bim`` model files and comparison definitions."""

from __future__ import annotations

import json
import shutil
from pathlib import Path
from typing import Any

_FIXTURES_DIR = Path(__file__).parent

MODEL_FILES = [
    "sales_1400.bim",
    "sales_1200.bim",
    "sales_dq_1400.bim",
    "cube_1103.bim",
    "sales_1500.bim",
]


def load_bim(name: str) -> dict[str, Any]:
    """Load one sample model file as a dict."""
    return json.loads((_FIXTURES_DIR / name).read_text())


def copy_models(dest: Path) -> Path:
    """Copy every sample model file into ``dest`` and return ``dest``.

    Upgrades rewrite model files, so tests work on copies.
    """
    for name in MODEL_FILES:
        shutil.copy(_FIXTURES_DIR / name, dest / name)
    return dest


def write_definition(
    dest: Path,
    source: str,
    target: str,
    interactive: bool = False,
    name: str = "comparison.json",
) -> Path:
    """Write a comparison definition pointing at two model files in ``dest``."""
    path = dest / name
    path.write_text(
        json.dumps(
            {
                "source": {"address": source},
                "target": {"address": target},
                "interactive": interactive,
            }
        )
    )
    return path
