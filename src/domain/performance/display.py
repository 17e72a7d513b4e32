"""Presentation rounding for derived training metrics."""

from __future__ import annotations

from dataclasses import asdict
from typing import Dict

from .evaluation import DerivedMetrics

DISPLAY_PRECISION: Dict[str, int] = {
    "vo2_max": 2,
    "training_distance": 0,
    "training_intensity": 1,
    "training_speed": 2,
    "total_o2_consumption": 2,
    "caloric_expenditure": 0,
    "weight_loss": 3,
}

DISPLAY_UNITS: Dict[str, str] = {
    "vo2_max": "mL/kg/min",
    "training_distance": "m",
    "training_intensity": "%",
    "training_speed": "km/h",
    "total_o2_consumption": "L",
    "caloric_expenditure": "kcal",
    "weight_loss": "kg",
}


def format_metrics_for_display(metrics: DerivedMetrics) -> Dict[str, str]:
    """Render each metric with its fixed number of decimals and unit."""

    formatted: Dict[str, str] = {}
    for name, value in asdict(metrics).items():
        digits = DISPLAY_PRECISION[name]
        unit = DISPLAY_UNITS[name]
        separator = "" if unit in ("m", "%") else " "
        formatted[name] = f"{value:.{digits}f}{separator}{unit}"
    return formatted
