from __future__ import annotations

from typing import List, Optional, Protocol, runtime_checkable

from ...models.assessment import PerformanceTest
from ...models.evaluation import PerformanceEvaluationRecord
from ...models.trainee import Trainee


@runtime_checkable
class TraineeRepository(Protocol):
    """Port defining the trainee-facing Notion operations."""

    async def list_trainees(self) -> List[Trainee]:
        """Return every trainee, active or not."""

    async def get_trainee(self, trainee_id: str) -> Optional[Trainee]:
        """Return a trainee, or ``None`` when it does not exist."""

    async def set_active(self, trainee_id: str, is_active: bool) -> None:
        """Persist a trainee's active flag."""


@runtime_checkable
class AssessmentTestRepository(Protocol):
    """Port defining the test-facing Notion operations."""

    async def list_tests_for_trainee(self, trainee_id: str) -> List[PerformanceTest]:
        """Return the tests taken by a trainee, newest first."""

    async def get_test(self, test_id: str) -> Optional[PerformanceTest]:
        """Return a test, or ``None`` when it does not exist."""

    async def delete_test(self, test_id: str) -> None:
        """Remove a test."""


@runtime_checkable
class EvaluationRepository(Protocol):
    """Port defining the performance-evaluation Notion operations."""

    async def create_evaluation(self, record: PerformanceEvaluationRecord) -> str:
        """Persist an evaluation and return its identifier."""

    async def list_evaluations(
        self, trainee_id: Optional[str] = None
    ) -> List[PerformanceEvaluationRecord]:
        """Return stored evaluations, optionally for one trainee."""
