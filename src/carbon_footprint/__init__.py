from .constants import EMISSION_UNIT, ERROR_PREFIX
from .emitters import (
    Bicycle,
    Building,
    Car,
    Emitter,
    IncompleteEmissionDataError,
    compute_footprint,
    describe,
)
from .report import build_reference_emitters, render_report, run
from .sources import EmissionSource
from .writers import build_footprint_table, format_footprint_table

__all__ = [
    "EMISSION_UNIT",
    "ERROR_PREFIX",
    "Bicycle",
    "Building",
    "Car",
    "EmissionSource",
    "Emitter",
    "IncompleteEmissionDataError",
    "build_footprint_table",
    "build_reference_emitters",
    "compute_footprint",
    "describe",
    "format_footprint_table",
    "render_report",
    "run",
]
