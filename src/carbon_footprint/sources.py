"""Emission sources: a quantity of some resource paired with its CO2 factor."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping


@dataclass(frozen=True)
class EmissionSource:
    """A single emitting resource.

    ``unit`` is informational only. ``quantity`` is not validated here; a zero
    or negative quantity is legal until the source is attached to an emitter.
    """

    name: str
    unit: str
    factor: float
    quantity: float = 0.0

    def calculate_emissions(self) -> float:
        return self.factor * self.quantity

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "EmissionSource":
        return cls(
            name=str(values["name"]),
            unit=str(values.get("unit", "")),
            factor=float(values["factor"]),
            quantity=float(values.get("quantity", 0.0)),
        )


def require_positive_quantity(source: EmissionSource) -> EmissionSource:
    """Return ``source`` unchanged, or raise ``ValueError`` if its quantity is not positive."""
    if source.quantity <= 0:
        raise ValueError(f"Quantity must be positive for source: {source.name}")
    return source


def sum_emissions(sources: Iterable[EmissionSource]) -> float:
    """Sum emissions in the given order."""
    total = 0.0
    for source in sources:
        total += source.calculate_emissions()
    return total
