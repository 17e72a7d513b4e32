from __future__ import annotations

from typing import Awaitable, List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..application.assessments import AssessmentTestNotFoundError
from ..application.evaluations import (
    CalculateMetricsUseCase,
    CreatePerformanceEvaluationUseCase,
    ListEvaluationsUseCase,
    PreviewPerformanceEvaluationUseCase,
    UnsuitableTestError,
)
from ..application.trainees import TraineeInactiveError, TraineeNotFoundError
from ..domain.performance import EvaluationInputError
from ..models.evaluation import (
    DerivedMetricsResponse,
    MetricCalculationRequest,
    PerformanceEvaluationRecord,
    PerformanceEvaluationSubmission,
)
from ..models.responses import ERROR_RESPONSES
from ..platform.wiring import (
    get_calculate_metrics_use_case,
    get_create_evaluation_use_case,
    get_list_evaluations_use_case,
    get_preview_evaluation_use_case,
)

router: APIRouter = APIRouter(responses=ERROR_RESPONSES)


async def _resolve(pending: Awaitable[PerformanceEvaluationRecord]) -> PerformanceEvaluationRecord:
    """Await an evaluation use case, mapping its errors onto HTTP statuses."""

    try:
        return await pending
    except TraineeNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Trainee not found"}) from exc
    except AssessmentTestNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Test not found"}) from exc
    except (TraineeInactiveError, UnsuitableTestError, EvaluationInputError) as exc:
        raise HTTPException(status_code=422, detail={"error": str(exc)}) from exc


@router.post("/performance-evaluations/calculate", response_model=DerivedMetricsResponse)
async def calculate_metrics(
    request: MetricCalculationRequest,
    use_case: CalculateMetricsUseCase = Depends(get_calculate_metrics_use_case),
) -> DerivedMetricsResponse:
    try:
        metrics = use_case(request)
    except EvaluationInputError as exc:
        raise HTTPException(status_code=422, detail={"error": str(exc)}) from exc
    return DerivedMetricsResponse.from_metrics(metrics)


@router.post(
    "/performance-evaluations/preview", response_model=PerformanceEvaluationRecord
)
async def preview_performance_evaluation(
    submission: PerformanceEvaluationSubmission,
    use_case: PreviewPerformanceEvaluationUseCase = Depends(get_preview_evaluation_use_case),
) -> PerformanceEvaluationRecord:
    """Compute the evaluation a submission would produce without storing it."""
    return await _resolve(use_case(submission))


@router.post(
    "/performance-evaluations",
    response_model=PerformanceEvaluationRecord,
    status_code=201,
)
async def create_performance_evaluation(
    submission: PerformanceEvaluationSubmission,
    use_case: CreatePerformanceEvaluationUseCase = Depends(get_create_evaluation_use_case),
) -> PerformanceEvaluationRecord:
    return await _resolve(use_case(submission))


@router.get(
    "/performance-evaluations", response_model=List[PerformanceEvaluationRecord]
)
async def list_performance_evaluations(
    trainee_id: Optional[str] = Query(None, description="Only evaluations of this trainee."),
    use_case: ListEvaluationsUseCase = Depends(get_list_evaluations_use_case),
) -> List[PerformanceEvaluationRecord]:
    return await use_case(trainee_id)
