"""Fixtures describing the formstate package layout for pytestarch."""

from pathlib import Path

import pytest
from pytestarch import (
    EvaluableArchitecture,
    LayeredArchitecture,
    get_evaluable_architecture,
)

SRC_DIR = Path(__file__).resolve().parents[2] / "src"

# Module names are resolved relative to SRC_DIR, hence the "src." prefix.
PACKAGES = (
    "domain",
    "reducers",
    "application",
    "schemas",
    "infrastructure",
    "visualization",
)


@pytest.fixture(scope="session")
def evaluable() -> EvaluableArchitecture:
    return get_evaluable_architecture(str(SRC_DIR), str(SRC_DIR / "formstate"))


@pytest.fixture(scope="session")
def layers() -> LayeredArchitecture:
    """One layer per top-level subpackage of formstate."""
    architecture = LayeredArchitecture()
    for package in PACKAGES:
        architecture = architecture.layer(package).containing_modules(
            [f"src.formstate.{package}"]
        )
    return architecture
