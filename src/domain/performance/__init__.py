"""Performance evaluation domain utilities."""

from .display import DISPLAY_PRECISION, format_metrics_for_display
from .evaluation import (
    DEFAULT_BODY_WEIGHT_KG,
    DerivedMetrics,
    EvaluationInput,
    EvaluationInputError,
    calculate_from_input,
    calculate_performance_evaluation,
    estimate_vo2max,
    resolve_body_weight,
)

__all__ = [
    "DEFAULT_BODY_WEIGHT_KG",
    "DISPLAY_PRECISION",
    "DerivedMetrics",
    "EvaluationInput",
    "EvaluationInputError",
    "calculate_from_input",
    "calculate_performance_evaluation",
    "estimate_vo2max",
    "format_metrics_for_display",
    "resolve_body_weight",
]
