"""Training metrics derived from a Cooper 12-minute run."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from math import isfinite
from typing import Optional

# Cooper (1968): VO2max = (distance_m - 504.9) / 44.73
COOPER_INTERCEPT_M: float = 504.9
COOPER_SLOPE_M: float = 44.73

# Training pace is the Cooper test pace scaled by the prescribed intensity.
COOPER_TEST_MINUTES: float = 12.0

KCAL_PER_LITRE_O2: float = 5.0
KCAL_PER_KG_FAT: float = 7700.0

DEFAULT_BODY_WEIGHT_KG: float = 70.0


class EvaluationInputError(ValueError):
    """Raised when an input falls outside the calculator's domain."""


@dataclass(frozen=True)
class EvaluationInput:
    """Values a performance evaluation is computed from."""

    cooper_distance_m: float
    intensity_percent: float
    duration_minutes: float
    body_weight_kg: float


@dataclass(frozen=True)
class DerivedMetrics:
    """Session prescription derived from an :class:`EvaluationInput`.

    ``training_distance`` is in metres, ``training_speed`` in km/h,
    ``total_o2_consumption`` in litres, ``caloric_expenditure`` in kcal and
    ``weight_loss`` in kilograms. ``training_intensity`` echoes the
    prescribed percentage.
    """

    vo2_max: float
    training_distance: float
    training_intensity: float
    training_speed: float
    total_o2_consumption: float
    caloric_expenditure: float
    weight_loss: float


def _require_positive(name: str, value: float) -> float:
    if isinstance(value, bool):
        raise EvaluationInputError(f"{name} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise EvaluationInputError(f"{name} must be a number, got {value!r}") from exc
    if not isfinite(number) or number <= 0:
        raise EvaluationInputError(f"{name} must be a positive number, got {value!r}")
    return number


def estimate_vo2max(cooper_distance_m: float) -> float:
    """Return VO2max in mL/kg/min from the distance covered in 12 minutes."""

    distance = _require_positive("cooper_distance_m", cooper_distance_m)
    if distance <= COOPER_INTERCEPT_M:
        raise EvaluationInputError(
            f"cooper_distance_m must exceed {COOPER_INTERCEPT_M} m to estimate VO2max, "
            f"got {cooper_distance_m!r}"
        )
    return (distance - COOPER_INTERCEPT_M) / COOPER_SLOPE_M


def calculate_performance_evaluation(
    cooper_distance_m: float,
    intensity_percent: float,
    duration_minutes: float,
    body_weight_kg: float,
) -> DerivedMetrics:
    """Compute the training metrics for a session at a fraction of VO2max.

    Raises :class:`EvaluationInputError` when an argument is missing,
    non-finite or non-positive, when the intensity exceeds 100 %, when the
    distance is too short for the Cooper regression, or when the inputs are
    so large that a metric overflows. No value is rounded.
    """

    intensity = _require_positive("intensity_percent", intensity_percent)
    if intensity > 100:
        raise EvaluationInputError(
            f"intensity_percent must not exceed 100, got {intensity_percent!r}"
        )
    duration = _require_positive("duration_minutes", duration_minutes)
    weight = _require_positive("body_weight_kg", body_weight_kg)
    distance = _require_positive("cooper_distance_m", cooper_distance_m)
    vo2_max = estimate_vo2max(distance)

    fraction = intensity / 100
    training_vo2 = vo2_max * fraction
    speed_m_per_min = fraction * distance / COOPER_TEST_MINUTES
    total_o2_litres = training_vo2 * weight * duration / 1000
    kcal = total_o2_litres * KCAL_PER_LITRE_O2

    metrics = DerivedMetrics(
        vo2_max=vo2_max,
        training_distance=speed_m_per_min * duration,
        training_intensity=intensity,
        training_speed=speed_m_per_min * 60 / 1000,
        total_o2_consumption=total_o2_litres,
        caloric_expenditure=kcal,
        weight_loss=kcal / KCAL_PER_KG_FAT,
    )
    for name, value in asdict(metrics).items():
        if not isfinite(value):
            raise EvaluationInputError(f"inputs are too large: {name} overflows")
    return metrics


def calculate_from_input(evaluation_input: EvaluationInput) -> DerivedMetrics:
    return calculate_performance_evaluation(
        evaluation_input.cooper_distance_m,
        evaluation_input.intensity_percent,
        evaluation_input.duration_minutes,
        evaluation_input.body_weight_kg,
    )


def resolve_body_weight(
    weight_kg: Optional[float], default: float = DEFAULT_BODY_WEIGHT_KG
) -> float:
    """Return the recorded weight, or ``default`` when none was recorded."""

    if not weight_kg:
        return default
    return weight_kg
