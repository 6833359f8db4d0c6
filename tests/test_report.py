import io

import pytest

from carbon_footprint.constants import ERROR_PREFIX
from carbon_footprint.emitters import Bicycle, Building, Car
from carbon_footprint.report import build_reference_emitters, render_report, run
from carbon_footprint.sources import EmissionSource


def test_reference_emitters_are_built_in_order():
    building, car, bicycle = build_reference_emitters()
    assert isinstance(building, Building)
    assert [s.name for s in building.sources] == ["Natural Gas", "Electricity"]
    assert isinstance(car, Car)
    assert [s.name for s in car.secondary_sources] == ["Motor Oil"]
    assert isinstance(bicycle, Bicycle)
    assert [s.name for s in bicycle.secondary_sources] == ["Tire Rubber"]


def test_reference_footprints():
    building, car, bicycle = build_reference_emitters()
    assert building.compute_footprint() == pytest.approx(69.049915)
    assert car.compute_footprint() == pytest.approx(47413.3333, rel=1e-6)
    assert bicycle.compute_footprint() == pytest.approx(0.26672)


def test_render_report_yields_one_block_per_emitter():
    blocks = list(render_report(build_reference_emitters()))
    assert len(blocks) == 3
    assert blocks[0].startswith("Building Name: Empire State\n")


def test_run_writes_reference_report(reference_report):
    stdout, stderr = io.StringIO(), io.StringIO()
    assert run(stdout=stdout, stderr=stderr) == 0
    assert stdout.getvalue() == reference_report
    assert stderr.getvalue() == ""


def test_run_keeps_output_written_before_a_failure():
    emitters = [
        Car("Model T", 20, EmissionSource("Gasoline", "gallons", 0.00889, 10), 100),
        Building("Annex"),
    ]
    stdout, stderr = io.StringIO(), io.StringIO()
    assert run(emitters, stdout=stdout, stderr=stderr) == 1
    assert stdout.getvalue().startswith("Car Model: Model T\n")
    assert stderr.getvalue() == f"{ERROR_PREFIX}Emission data is incomplete for building: Annex\n"


def test_run_reports_construction_failures():
    def factory():
        return [Car("Zero", 0, EmissionSource("Gasoline", "gallons", 0.00889, 1), 1)]

    stdout, stderr = io.StringIO(), io.StringIO()
    assert run(factory, stdout=stdout, stderr=stderr) == 1
    assert stdout.getvalue() == ""
    assert stderr.getvalue() == "An error occurred: Fuel efficiency must be positive for car: Zero\n"


def test_run_reports_population_failures():
    def factory():
        return [Building("Empire State").add_source(EmissionSource("Steam", "lb", 0.1, -3))]

    stderr = io.StringIO()
    assert run(factory, stdout=io.StringIO(), stderr=stderr) == 1
    assert "Quantity must be positive for source: Steam" in stderr.getvalue()
