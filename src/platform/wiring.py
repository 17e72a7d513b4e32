"""FastAPI dependency wiring for application use cases."""

from __future__ import annotations

from fastapi import Depends

from ..application.assessments import (
    DeleteTestUseCase,
    ListCooperTestsUseCase,
    ListTraineeTestsUseCase,
)
from ..application.evaluations import (
    CalculateMetricsUseCase,
    CreatePerformanceEvaluationUseCase,
    ListEvaluationsUseCase,
    PreviewPerformanceEvaluationUseCase,
)
from ..application.trainees import (
    ListTraineesUseCase,
    SetTraineeActiveUseCase,
    ToggleTraineeStatusUseCase,
)
from ..notion.application.ports import (
    AssessmentTestRepository,
    EvaluationRepository,
    TraineeRepository,
)
from ..notion.infrastructure.assessment_test_repository import create_notion_test_adapter
from ..notion.infrastructure.evaluation_repository import create_notion_evaluation_adapter
from ..notion.infrastructure.trainee_repository import create_notion_trainee_adapter
from ..services.interfaces import NotionAPI
from ..services.notion import get_notion_client
from .config import Settings, get_settings


def provide_trainee_port(
    settings: Settings = Depends(get_settings),
    client: NotionAPI = Depends(get_notion_client),
) -> TraineeRepository:
    return create_notion_trainee_adapter(settings=settings, client=client)


def provide_test_port(
    settings: Settings = Depends(get_settings),
    client: NotionAPI = Depends(get_notion_client),
) -> AssessmentTestRepository:
    return create_notion_test_adapter(settings=settings, client=client)


def provide_evaluation_port(
    settings: Settings = Depends(get_settings),
    client: NotionAPI = Depends(get_notion_client),
) -> EvaluationRepository:
    return create_notion_evaluation_adapter(settings=settings, client=client)


def get_list_trainees_use_case(
    repository: TraineeRepository = Depends(provide_trainee_port),
) -> ListTraineesUseCase:
    return ListTraineesUseCase(repository)


def get_set_trainee_active_use_case(
    repository: TraineeRepository = Depends(provide_trainee_port),
) -> SetTraineeActiveUseCase:
    return SetTraineeActiveUseCase(repository)


def get_toggle_trainee_status_use_case(
    repository: TraineeRepository = Depends(provide_trainee_port),
) -> ToggleTraineeStatusUseCase:
    return ToggleTraineeStatusUseCase(repository)


def get_list_trainee_tests_use_case(
    trainee_repository: TraineeRepository = Depends(provide_trainee_port),
    test_repository: AssessmentTestRepository = Depends(provide_test_port),
) -> ListTraineeTestsUseCase:
    return ListTraineeTestsUseCase(trainee_repository, test_repository)


def get_list_cooper_tests_use_case(
    trainee_repository: TraineeRepository = Depends(provide_trainee_port),
    test_repository: AssessmentTestRepository = Depends(provide_test_port),
) -> ListCooperTestsUseCase:
    return ListCooperTestsUseCase(trainee_repository, test_repository)


def get_delete_test_use_case(
    repository: AssessmentTestRepository = Depends(provide_test_port),
) -> DeleteTestUseCase:
    return DeleteTestUseCase(repository)


def get_calculate_metrics_use_case(
    settings: Settings = Depends(get_settings),
) -> CalculateMetricsUseCase:
    return CalculateMetricsUseCase(default_body_weight_kg=settings.default_body_weight_kg)


def get_preview_evaluation_use_case(
    settings: Settings = Depends(get_settings),
    trainee_repository: TraineeRepository = Depends(provide_trainee_port),
    test_repository: AssessmentTestRepository = Depends(provide_test_port),
) -> PreviewPerformanceEvaluationUseCase:
    return PreviewPerformanceEvaluationUseCase(
        trainee_repository=trainee_repository,
        test_repository=test_repository,
        default_body_weight_kg=settings.default_body_weight_kg,
    )


def get_create_evaluation_use_case(
    preview: PreviewPerformanceEvaluationUseCase = Depends(get_preview_evaluation_use_case),
    repository: EvaluationRepository = Depends(provide_evaluation_port),
) -> CreatePerformanceEvaluationUseCase:
    return CreatePerformanceEvaluationUseCase(preview=preview, repository=repository)


def get_list_evaluations_use_case(
    repository: EvaluationRepository = Depends(provide_evaluation_port),
) -> ListEvaluationsUseCase:
    return ListEvaluationsUseCase(repository)


__all__ = [
    "provide_trainee_port",
    "provide_test_port",
    "provide_evaluation_port",
    "get_list_trainees_use_case",
    "get_set_trainee_active_use_case",
    "get_toggle_trainee_status_use_case",
    "get_list_trainee_tests_use_case",
    "get_list_cooper_tests_use_case",
    "get_delete_test_use_case",
    "get_calculate_metrics_use_case",
    "get_preview_evaluation_use_case",
    "get_create_evaluation_use_case",
    "get_list_evaluations_use_case",
]
