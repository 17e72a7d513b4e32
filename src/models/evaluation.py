from __future__ import annotations

from dataclasses import asdict
from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from ..domain.performance import DerivedMetrics


class MetricCalculationRequest(BaseModel):
    """Raw calculator inputs; body weight falls back to the configured default."""

    cooper_distance_m: float = Field(
        ..., gt=0, description="Distance covered in the 12-minute Cooper run, in metres."
    )
    intensity_percent: float = Field(
        ..., gt=0, le=100, description="Prescribed intensity as a percentage of VO2max."
    )
    duration_minutes: float = Field(..., gt=0, description="Training session length in minutes.")
    body_weight_kg: Optional[float] = Field(
        None, gt=0, description="Body weight in kilograms; omitted uses the default weight."
    )


class DerivedMetricsResponse(BaseModel):
    """Unrounded training metrics returned by the calculator."""

    vo2_max: float = Field(..., description="Estimated VO2max in mL/kg/min")
    training_distance: float = Field(..., description="Session distance in metres")
    training_intensity: float = Field(..., description="Applied intensity in percent")
    training_speed: float = Field(..., description="Target pace in km/h")
    total_o2_consumption: float = Field(..., description="Oxygen consumed in litres")
    caloric_expenditure: float = Field(..., description="Energy cost in kcal")
    weight_loss: float = Field(..., description="Fat-mass equivalent in kilograms")

    @classmethod
    def from_metrics(cls, metrics: DerivedMetrics) -> "DerivedMetricsResponse":
        return cls(**asdict(metrics))


class PerformanceEvaluationSubmission(BaseModel):
    """Inputs collected by the evaluation form."""

    trainee_id: str
    test_id: str = Field(..., description="Identifier of the Cooper test being evaluated.")
    intensity_percentage: float = Field(
        ..., gt=0, le=100, description="Prescribed intensity as a percentage of VO2max."
    )
    training_time: float = Field(..., gt=0, description="Training session length in minutes.")
    test_date: date
    observations: str = ""


class PerformanceEvaluationRecord(DerivedMetricsResponse):
    """Submission inputs combined with the metrics derived from them."""

    id: Optional[str] = Field(None, description="Stored page identifier once persisted.")
    trainee_id: str
    test_id: str
    intensity_percentage: float
    training_time: float
    test_date: date
    observations: str = ""
    cooper_distance_m: float
    body_weight_kg: float

    @classmethod
    def build(
        cls,
        submission: PerformanceEvaluationSubmission,
        *,
        cooper_distance_m: float,
        body_weight_kg: float,
        metrics: DerivedMetrics,
    ) -> "PerformanceEvaluationRecord":
        return cls(
            **submission.model_dump(),
            cooper_distance_m=cooper_distance_m,
            body_weight_kg=body_weight_kg,
            **asdict(metrics),
        )
