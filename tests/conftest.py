# tests/conftest.py
from __future__ import annotations

import pytest

from uniform_palette.core_types import GammaTables
from uniform_palette.cube import quantize_cube
from uniform_palette.gamma import build_gamma_tables


@pytest.fixture(scope="session")
def gamma() -> GammaTables:
    return build_gamma_tables()


@pytest.fixture()
def raw_cube():
    return quantize_cube()
