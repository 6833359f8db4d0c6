from __future__ import annotations

EMISSION_UNIT = "mt CO2"
FUEL_EFFICIENCY_UNIT = "mpg"
RIDER_WEIGHT_UNIT = "kg"
RIDING_TIME_UNIT = "hours"

ERROR_PREFIX = "An error occurred: "

# Reference scenario: one emitter of each kind, reported in this order.
REFERENCE_BUILDING: dict[str, object] = {
    "name": "Empire State",
    "sources": [
        {"name": "Natural Gas", "unit": "therms", "factor": 0.005307, "quantity": 12345.0},
        {"name": "Electricity", "unit": "kWh", "factor": 0.000707, "quantity": 5000.0},
    ],
}

REFERENCE_CAR: dict[str, object] = {
    "model": "Lamborghini Huracan Performante",
    "fuel_efficiency": 12.0,
    "primary_fuel_source": {
        "name": "Gasoline",
        "unit": "gallons",
        "factor": 0.00889,
        "quantity": 8000.0,
    },
    "distance_traveled": 8000.0,
    "secondary_sources": [
        {"name": "Motor Oil", "unit": "quarts", "factor": 0.22933, "quantity": 7.93},
    ],
}

REFERENCE_BICYCLE: dict[str, object] = {
    "frame_material_source": {"name": "Aluminum", "unit": "", "factor": 0.25, "quantity": 1.0},
    "hours_ridden": 320.0,
    "rider_weight": 75.0,
    "secondary_sources": [
        {"name": "Tire Rubber", "unit": "kg", "factor": 0.0044, "quantity": 3.8},
    ],
}
