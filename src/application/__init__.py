"""Application layer use cases coordinating domain services."""

from .assessments import (
    AssessmentTestNotFoundError,
    DeleteTestUseCase,
    ListCooperTestsUseCase,
    ListTraineeTestsUseCase,
)
from .evaluations import (
    CalculateMetricsUseCase,
    CreatePerformanceEvaluationUseCase,
    ListEvaluationsUseCase,
    PreviewPerformanceEvaluationUseCase,
    UnsuitableTestError,
)
from .trainees import (
    ListTraineesUseCase,
    SetTraineeActiveUseCase,
    ToggleTraineeStatusUseCase,
    TraineeInactiveError,
    TraineeNotFoundError,
)

__all__ = [
    "AssessmentTestNotFoundError",
    "DeleteTestUseCase",
    "ListCooperTestsUseCase",
    "ListTraineeTestsUseCase",
    "CalculateMetricsUseCase",
    "CreatePerformanceEvaluationUseCase",
    "ListEvaluationsUseCase",
    "PreviewPerformanceEvaluationUseCase",
    "UnsuitableTestError",
    "ListTraineesUseCase",
    "SetTraineeActiveUseCase",
    "ToggleTraineeStatusUseCase",
    "TraineeInactiveError",
    "TraineeNotFoundError",
]
