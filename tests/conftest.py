"""Test configuration for the cyclogenesis model."""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is importable when running the ``pytest`` console script.
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from common.constants import PhysicalConstants
from common.types import Position


@pytest.fixture
def constants() -> PhysicalConstants:
    return PhysicalConstants.default()


@pytest.fixture
def surface_position() -> Position:
    return Position.create(45.0, 0.0, 1013.0)


@pytest.fixture
def upper_position() -> Position:
    return Position.create(45.0, 5000.0, 500.0)
