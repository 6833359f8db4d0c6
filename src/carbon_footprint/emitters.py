"""Emitters that aggregate emission sources into a CO2 footprint.

The set of emitter kinds is closed: :class:`Building`, :class:`Car` and
:class:`Bicycle`. Each combines its sources with its own rule; the module-level
:func:`compute_footprint` and :func:`describe` dispatch over exactly these three.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Union

from .constants import EMISSION_UNIT, FUEL_EFFICIENCY_UNIT, RIDER_WEIGHT_UNIT, RIDING_TIME_UNIT
from .sources import EmissionSource, require_positive_quantity, sum_emissions

LOGGER = logging.getLogger("carbon_footprint.emitters")


class IncompleteEmissionDataError(RuntimeError):
    """Raised when a building's sources add up to a non-positive total."""


def format_number(value: float) -> str:
    """Six significant digits, trailing zeros stripped (``69.0499``, ``12``)."""
    return format(value, "g")


def _total_line(total: float) -> str:
    return f"Total CO2 Emissions: {format_number(total)} {EMISSION_UNIT}\n"


@dataclass
class Building:
    name: str
    _sources: list[EmissionSource] = field(default_factory=list, init=False, repr=False)

    kind = "building"

    @property
    def label(self) -> str:
        return self.name

    @property
    def sources(self) -> tuple[EmissionSource, ...]:
        return tuple(self._sources)

    def add_source(self, source: EmissionSource) -> Building:
        self._sources.append(require_positive_quantity(source))
        LOGGER.debug("Building '%s': attached source '%s'", self.name, source.name)
        return self

    def compute_footprint(self) -> float:
        total = sum_emissions(self._sources)
        if total <= 0:
            raise IncompleteEmissionDataError(
                f"Emission data is incomplete for building: {self.name}"
            )
        LOGGER.debug("Building '%s' footprint: %s %s", self.name, total, EMISSION_UNIT)
        return total

    def describe(self) -> str:
        return f"Building Name: {self.name}\n" + _total_line(self.compute_footprint())


@dataclass
class Car:
    """A car whose footprint is driven by its primary fuel.

    Secondary sources (lubricants and the like) are recorded but do not enter
    :meth:`compute_footprint`.
    """

    model: str
    fuel_efficiency: float
    primary_fuel_source: EmissionSource
    distance_traveled: float
    _secondary_sources: list[EmissionSource] = field(default_factory=list, init=False, repr=False)

    kind = "car"

    def __post_init__(self) -> None:
        if self.fuel_efficiency <= 0:
            raise ValueError(f"Fuel efficiency must be positive for car: {self.model}")

    @property
    def label(self) -> str:
        return self.model

    @property
    def secondary_sources(self) -> tuple[EmissionSource, ...]:
        return tuple(self._secondary_sources)

    def add_secondary_co2_source(self, source: EmissionSource) -> Car:
        self._secondary_sources.append(require_positive_quantity(source))
        LOGGER.debug("Car '%s': attached secondary source '%s'", self.model, source.name)
        return self

    def compute_footprint(self) -> float:
        total = (
            self.primary_fuel_source.calculate_emissions()
            * self.distance_traveled
            / self.fuel_efficiency
        )
        LOGGER.debug("Car '%s' footprint: %s %s", self.model, total, EMISSION_UNIT)
        return total

    def describe(self) -> str:
        return (
            f"Car Model: {self.model}\n"
            f"Fuel Efficiency: {format_number(self.fuel_efficiency)} {FUEL_EFFICIENCY_UNIT}\n"
            + _total_line(self.compute_footprint())
        )


@dataclass
class Bicycle:
    """A bicycle: embodied frame emissions plus wear items.

    Unlike :class:`Building`, a non-positive total is returned as is.
    """

    frame_material_source: EmissionSource
    hours_ridden: float
    rider_weight: float
    _secondary_sources: list[EmissionSource] = field(default_factory=list, init=False, repr=False)

    kind = "bicycle"

    def __post_init__(self) -> None:
        if self.rider_weight <= 0:
            raise ValueError(
                f"Rider weight must be positive for bicycle: {self.frame_material_source.name}"
            )

    @property
    def label(self) -> str:
        return self.frame_material_source.name

    @property
    def secondary_sources(self) -> tuple[EmissionSource, ...]:
        return tuple(self._secondary_sources)

    def add_source(self, source: EmissionSource) -> Bicycle:
        self._secondary_sources.append(require_positive_quantity(source))
        LOGGER.debug("Bicycle '%s': attached source '%s'", self.label, source.name)
        return self

    def compute_footprint(self) -> float:
        total = self.frame_material_source.calculate_emissions() + sum_emissions(
            self._secondary_sources
        )
        LOGGER.debug("Bicycle '%s' footprint: %s %s", self.label, total, EMISSION_UNIT)
        return total

    def describe(self) -> str:
        return (
            f"Bicycle Type: {self.frame_material_source.name}\n"
            f"Rider Weight: {format_number(self.rider_weight)} {RIDER_WEIGHT_UNIT}\n"
            f"Riding Time: {format_number(self.hours_ridden)} {RIDING_TIME_UNIT}\n"
            + _total_line(self.compute_footprint())
        )


Emitter = Union[Building, Car, Bicycle]
EMITTER_TYPES: tuple[type, ...] = (Building, Car, Bicycle)


def _ensure_emitter(emitter: object) -> Emitter:
    if not isinstance(emitter, EMITTER_TYPES):
        raise TypeError(
            f"Unsupported emitter type '{type(emitter).__name__}'; "
            "expected Building, Car or Bicycle."
        )
    return emitter


def compute_footprint(emitter: Emitter) -> float:
    """Return the footprint of any supported emitter in mt CO2."""
    return _ensure_emitter(emitter).compute_footprint()


def describe(emitter: Emitter) -> str:
    """Return the multi-line text summary of any supported emitter."""
    return _ensure_emitter(emitter).describe()
