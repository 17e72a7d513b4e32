from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from loguru import logger

from ..models.assessment import COOPER_TEST_TYPE, PerformanceTest
from ..models.responses import OperationStatus
from ..notion.application.ports import AssessmentTestRepository, TraineeRepository
from .trainees import TraineeNotFoundError


class AssessmentTestNotFoundError(Exception):
    """Raised when attempting to operate on a missing test."""


def filter_by_type(
    tests: List[PerformanceTest], test_type: Optional[str]
) -> List[PerformanceTest]:
    if not test_type:
        return tests
    return [test for test in tests if test.is_type(test_type)]


def evaluable_cooper_tests(tests: List[PerformanceTest]) -> List[PerformanceTest]:
    """Keep Cooper tests that carry a recorded distance."""

    return [test for test in tests if test.is_cooper_with_distance]


@dataclass
class ListTraineeTestsUseCase:
    """Return a trainee's tests, optionally of one type."""

    trainee_repository: TraineeRepository
    test_repository: AssessmentTestRepository

    async def __call__(
        self, trainee_id: str, test_type: Optional[str] = None
    ) -> List[PerformanceTest]:
        if await self.trainee_repository.get_trainee(trainee_id) is None:
            raise TraineeNotFoundError(f"Trainee {trainee_id} not found")
        tests = await self.test_repository.list_tests_for_trainee(trainee_id)
        return filter_by_type(tests, test_type)


@dataclass
class ListCooperTestsUseCase:
    """Return the Cooper tests a trainee can be evaluated against."""

    trainee_repository: TraineeRepository
    test_repository: AssessmentTestRepository

    async def __call__(self, trainee_id: str) -> List[PerformanceTest]:
        if await self.trainee_repository.get_trainee(trainee_id) is None:
            raise TraineeNotFoundError(f"Trainee {trainee_id} not found")
        tests = await self.test_repository.list_tests_for_trainee(trainee_id)
        return evaluable_cooper_tests(filter_by_type(tests, COOPER_TEST_TYPE))


@dataclass
class DeleteTestUseCase:
    """Remove a recorded test."""

    repository: AssessmentTestRepository

    async def __call__(self, test_id: str) -> OperationStatus:
        if await self.repository.get_test(test_id) is None:
            raise AssessmentTestNotFoundError(f"Test {test_id} not found")
        await self.repository.delete_test(test_id)
        logger.info(f"Test {test_id} deleted")
        return OperationStatus(status="deleted", id=test_id)


__all__ = [
    "AssessmentTestNotFoundError",
    "DeleteTestUseCase",
    "ListCooperTestsUseCase",
    "ListTraineeTestsUseCase",
    "evaluable_cooper_tests",
    "filter_by_type",
]
