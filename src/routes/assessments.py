from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from ..application.assessments import AssessmentTestNotFoundError, DeleteTestUseCase
from ..models.responses import ERROR_RESPONSES, OperationStatus
from ..platform.wiring import get_delete_test_use_case

router: APIRouter = APIRouter(responses={404: ERROR_RESPONSES[404]})


@router.delete("/tests/{test_id}", response_model=OperationStatus)
async def delete_test(
    test_id: str,
    use_case: DeleteTestUseCase = Depends(get_delete_test_use_case),
) -> OperationStatus:
    try:
        return await use_case(test_id)
    except AssessmentTestNotFoundError as exc:
        raise HTTPException(status_code=404, detail={"error": "Test not found"}) from exc
