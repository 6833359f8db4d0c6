"""Build the reference scenario and write the per-emitter text report."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, Sequence, TextIO

from .constants import ERROR_PREFIX, REFERENCE_BICYCLE, REFERENCE_BUILDING, REFERENCE_CAR
from .emitters import Bicycle, Building, Car, Emitter, describe
from .sources import EmissionSource

LOGGER = logging.getLogger("carbon_footprint.report")


def build_reference_emitters() -> list[Emitter]:
    """Return the reference Building, Car and Bicycle, in that order."""
    building = Building(str(REFERENCE_BUILDING["name"]))
    for values in REFERENCE_BUILDING["sources"]:
        building.add_source(EmissionSource.from_mapping(values))

    car = Car(
        model=str(REFERENCE_CAR["model"]),
        fuel_efficiency=float(REFERENCE_CAR["fuel_efficiency"]),
        primary_fuel_source=EmissionSource.from_mapping(REFERENCE_CAR["primary_fuel_source"]),
        distance_traveled=float(REFERENCE_CAR["distance_traveled"]),
    )
    for values in REFERENCE_CAR["secondary_sources"]:
        car.add_secondary_co2_source(EmissionSource.from_mapping(values))

    bicycle = Bicycle(
        frame_material_source=EmissionSource.from_mapping(
            REFERENCE_BICYCLE["frame_material_source"]
        ),
        hours_ridden=float(REFERENCE_BICYCLE["hours_ridden"]),
        rider_weight=float(REFERENCE_BICYCLE["rider_weight"]),
    )
    for values in REFERENCE_BICYCLE["secondary_sources"]:
        bicycle.add_source(EmissionSource.from_mapping(values))

    return [building, car, bicycle]


def render_report(emitters: Iterable[Emitter]) -> Iterator[str]:
    """Yield each emitter's description in order.

    Descriptions are produced lazily so a failing emitter does not suppress
    those already yielded.
    """
    for emitter in emitters:
        yield describe(emitter)


def run(
    emitters: Sequence[Emitter] | Callable[[], Sequence[Emitter]] = build_reference_emitters,
    *,
    stdout: TextIO,
    stderr: TextIO,
) -> int:
    """Write the report to ``stdout`` and return a process exit status.

    ``emitters`` may be a factory so that failures raised while constructing
    or populating emitters are reported the same way as footprint failures.
    Invalid inputs (``ValueError``) and incomplete data (``RuntimeError``) are
    written to ``stderr`` with :data:`ERROR_PREFIX` and yield status 1.
    """
    try:
        if callable(emitters):
            emitters = emitters()
        LOGGER.info("Reporting %d emitters", len(emitters))
        for block in render_report(emitters):
            stdout.write(block)
            stdout.write("\n")
            stdout.flush()
    except (ValueError, RuntimeError) as exc:
        LOGGER.debug("Footprint report failed", exc_info=True)
        stderr.write(f"{ERROR_PREFIX}{exc}\n")
        return 1
    return 0
