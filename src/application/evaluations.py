from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional

from loguru import logger

from ..domain.performance import (
    DEFAULT_BODY_WEIGHT_KG,
    DerivedMetrics,
    EvaluationInputError,
    calculate_performance_evaluation,
    resolve_body_weight,
)
from ..models.evaluation import (
    MetricCalculationRequest,
    PerformanceEvaluationRecord,
    PerformanceEvaluationSubmission,
)
from ..notion.application.ports import (
    AssessmentTestRepository,
    EvaluationRepository,
    TraineeRepository,
)
from .assessments import AssessmentTestNotFoundError
from .trainees import TraineeInactiveError, TraineeNotFoundError

Calculator = Callable[[float, float, float, float], DerivedMetrics]


class UnsuitableTestError(Exception):
    """Raised when a test cannot feed a performance evaluation."""


@dataclass
class CalculateMetricsUseCase:
    """Run the calculator on raw inputs, defaulting a missing body weight."""

    default_body_weight_kg: float = DEFAULT_BODY_WEIGHT_KG
    calculator: Calculator = calculate_performance_evaluation

    def __call__(self, request: MetricCalculationRequest) -> DerivedMetrics:
        weight = resolve_body_weight(request.body_weight_kg, self.default_body_weight_kg)
        return self.calculator(
            request.cooper_distance_m,
            request.intensity_percent,
            request.duration_minutes,
            weight,
        )


@dataclass
class PreviewPerformanceEvaluationUseCase:
    """Resolve a submission's trainee and test and compute its metrics.

    Nothing is written; the returned record has no ``id``.
    """

    trainee_repository: TraineeRepository
    test_repository: AssessmentTestRepository
    default_body_weight_kg: float = DEFAULT_BODY_WEIGHT_KG
    calculator: Calculator = calculate_performance_evaluation

    async def __call__(
        self, submission: PerformanceEvaluationSubmission
    ) -> PerformanceEvaluationRecord:
        trainee = await self.trainee_repository.get_trainee(submission.trainee_id)
        if trainee is None:
            raise TraineeNotFoundError(f"Trainee {submission.trainee_id} not found")
        if not trainee.is_active:
            raise TraineeInactiveError(f"Trainee {submission.trainee_id} is inactive")

        test = await self.test_repository.get_test(submission.test_id)
        if test is None:
            raise AssessmentTestNotFoundError(f"Test {submission.test_id} not found")
        if test.trainee_id != trainee.id:
            raise UnsuitableTestError(
                f"Test {test.id} does not belong to trainee {trainee.id}"
            )
        if not test.is_cooper_with_distance:
            raise UnsuitableTestError(
                f"Test {test.id} is not a Cooper test with a recorded distance"
            )

        weight = resolve_body_weight(trainee.weight_kg, self.default_body_weight_kg)
        metrics = self.calculator(
            test.cooper_distance_m,
            submission.intensity_percentage,
            submission.training_time,
            weight,
        )
        return PerformanceEvaluationRecord.build(
            submission,
            cooper_distance_m=test.cooper_distance_m,
            body_weight_kg=weight,
            metrics=metrics,
        )


@dataclass
class CreatePerformanceEvaluationUseCase:
    """Compute a submission's metrics and persist the combined record."""

    preview: PreviewPerformanceEvaluationUseCase
    repository: EvaluationRepository

    async def __call__(
        self, submission: PerformanceEvaluationSubmission
    ) -> PerformanceEvaluationRecord:
        try:
            record = await self.preview(submission)
        except EvaluationInputError as exc:
            logger.warning(
                f"Rejected evaluation for trainee {submission.trainee_id}: {exc}"
            )
            raise
        record_id = await self.repository.create_evaluation(record)
        logger.info(
            f"Created evaluation {record_id} for trainee {record.trainee_id} "
            f"from test {record.test_id}"
        )
        return record.model_copy(update={"id": record_id})


@dataclass
class ListEvaluationsUseCase:
    """Return stored evaluations, optionally for one trainee."""

    repository: EvaluationRepository

    async def __call__(
        self, trainee_id: Optional[str] = None
    ) -> List[PerformanceEvaluationRecord]:
        return await self.repository.list_evaluations(trainee_id)


__all__ = [
    "CalculateMetricsUseCase",
    "CreatePerformanceEvaluationUseCase",
    "ListEvaluationsUseCase",
    "PreviewPerformanceEvaluationUseCase",
    "UnsuitableTestError",
]
