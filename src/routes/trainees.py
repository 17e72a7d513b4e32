from __future__ import annotations

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from ..application.assessments import ListCooperTestsUseCase, ListTraineeTestsUseCase
from ..application.trainees import (
    ListTraineesUseCase,
    SetTraineeActiveUseCase,
    ToggleTraineeStatusUseCase,
    TraineeNotFoundError,
)
from ..models.assessment import PerformanceTest
from ..models.responses import ERROR_RESPONSES, OperationStatus
from ..models.trainee import Trainee, TraineeStatusUpdate
from ..platform.wiring import (
    get_list_cooper_tests_use_case,
    get_list_trainee_tests_use_case,
    get_list_trainees_use_case,
    get_set_trainee_active_use_case,
    get_toggle_trainee_status_use_case,
)

router: APIRouter = APIRouter(responses={404: ERROR_RESPONSES[404]})

_NOT_FOUND = {"error": "Trainee not found"}


@router.get("/trainees", response_model=List[Trainee])
async def list_trainees(
    active_only: bool = Query(False, description="Return only active trainees."),
    use_case: ListTraineesUseCase = Depends(get_list_trainees_use_case),
) -> List[Trainee]:
    return await use_case(active_only)


@router.put("/trainees/{trainee_id}/status", response_model=OperationStatus)
async def set_trainee_status(
    trainee_id: str,
    update: TraineeStatusUpdate,
    use_case: SetTraineeActiveUseCase = Depends(get_set_trainee_active_use_case),
) -> OperationStatus:
    try:
        return await use_case(trainee_id, update.is_active)
    except TraineeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=_NOT_FOUND) from exc


@router.post("/trainees/{trainee_id}/toggle-status", response_model=OperationStatus)
async def toggle_trainee_status(
    trainee_id: str,
    use_case: ToggleTraineeStatusUseCase = Depends(get_toggle_trainee_status_use_case),
) -> OperationStatus:
    try:
        return await use_case(trainee_id)
    except TraineeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=_NOT_FOUND) from exc


@router.get("/trainees/{trainee_id}/tests", response_model=List[PerformanceTest])
async def list_trainee_tests(
    trainee_id: str,
    test_type: Optional[str] = Query(
        None, description="Only return tests of this type, e.g. cooper."
    ),
    use_case: ListTraineeTestsUseCase = Depends(get_list_trainee_tests_use_case),
) -> List[PerformanceTest]:
    try:
        return await use_case(trainee_id, test_type)
    except TraineeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=_NOT_FOUND) from exc


@router.get("/trainees/{trainee_id}/cooper-tests", response_model=List[PerformanceTest])
async def list_cooper_tests(
    trainee_id: str,
    use_case: ListCooperTestsUseCase = Depends(get_list_cooper_tests_use_case),
) -> List[PerformanceTest]:
    """Cooper tests with a recorded distance, ready for evaluation."""
    try:
        return await use_case(trainee_id)
    except TraineeNotFoundError as exc:
        raise HTTPException(status_code=404, detail=_NOT_FOUND) from exc
