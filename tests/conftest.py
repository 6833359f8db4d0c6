"""Ensure the project package is importable during tests without installation."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

src_path = str(SRC)
if src_path not in sys.path:
    sys.path.insert(0, src_path)


REFERENCE_REPORT = (
    "Building Name: Empire State\n"
    "Total CO2 Emissions: 69.0499 mt CO2\n"
    "\n"
    "Car Model: Lamborghini Huracan Performante\n"
    "Fuel Efficiency: 12 mpg\n"
    "Total CO2 Emissions: 47413.3 mt CO2\n"
    "\n"
    "Bicycle Type: Aluminum\n"
    "Rider Weight: 75 kg\n"
    "Riding Time: 320 hours\n"
    "Total CO2 Emissions: 0.26672 mt CO2\n"
    "\n"
)


@pytest.fixture
def reference_report() -> str:
    """Expected stdout for the reference building, car and bicycle."""
    return REFERENCE_REPORT
