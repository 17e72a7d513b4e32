from __future__ import annotations

from dataclasses import dataclass
from typing import List

from loguru import logger

from ..models.responses import OperationStatus
from ..models.trainee import Trainee
from ..notion.application.ports import TraineeRepository


class TraineeNotFoundError(Exception):
    """Raised when attempting to operate on a missing trainee."""


class TraineeInactiveError(Exception):
    """Raised when an inactive trainee is used in a new evaluation."""


def _status_for(is_active: bool) -> str:
    return "activated" if is_active else "deactivated"


@dataclass
class ListTraineesUseCase:
    """Return trainees, optionally only the active ones."""

    repository: TraineeRepository

    async def __call__(self, active_only: bool = False) -> List[Trainee]:
        trainees = await self.repository.list_trainees()
        if active_only:
            return [trainee for trainee in trainees if trainee.is_active]
        return trainees


@dataclass
class SetTraineeActiveUseCase:
    """Set a trainee's active flag explicitly."""

    repository: TraineeRepository

    async def __call__(self, trainee_id: str, is_active: bool) -> OperationStatus:
        trainee = await self.repository.get_trainee(trainee_id)
        if trainee is None:
            raise TraineeNotFoundError(f"Trainee {trainee_id} not found")
        await self.repository.set_active(trainee_id, is_active)
        logger.info(f"Trainee {trainee_id} {_status_for(is_active)}")
        return OperationStatus(status=_status_for(is_active), id=trainee_id)


@dataclass
class ToggleTraineeStatusUseCase:
    """Flip a trainee between active and inactive."""

    repository: TraineeRepository

    async def __call__(self, trainee_id: str) -> OperationStatus:
        trainee = await self.repository.get_trainee(trainee_id)
        if trainee is None:
            raise TraineeNotFoundError(f"Trainee {trainee_id} not found")
        is_active = not trainee.is_active
        await self.repository.set_active(trainee_id, is_active)
        logger.info(f"Trainee {trainee_id} {_status_for(is_active)}")
        return OperationStatus(status=_status_for(is_active), id=trainee_id)


__all__ = [
    "ListTraineesUseCase",
    "SetTraineeActiveUseCase",
    "ToggleTraineeStatusUseCase",
    "TraineeInactiveError",
    "TraineeNotFoundError",
]
