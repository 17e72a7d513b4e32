"""Streamlit page driving the performance-evaluation workflow."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar

import httpx
import streamlit as st
from fastapi import HTTPException
from loguru import logger

from src.application.assessments import AssessmentTestNotFoundError, ListCooperTestsUseCase
from src.application.evaluations import (
    CreatePerformanceEvaluationUseCase,
    PreviewPerformanceEvaluationUseCase,
    UnsuitableTestError,
)
from src.application.trainees import (
    ListTraineesUseCase,
    TraineeInactiveError,
    TraineeNotFoundError,
)
from src.domain.performance import (
    DerivedMetrics,
    EvaluationInputError,
    calculate_performance_evaluation,
    format_metrics_for_display,
    resolve_body_weight,
)
from src.models.assessment import PerformanceTest
from src.models.evaluation import PerformanceEvaluationSubmission
from src.models.trainee import Trainee
from src.notion.infrastructure.assessment_test_repository import create_notion_test_adapter
from src.notion.infrastructure.evaluation_repository import create_notion_evaluation_adapter
from src.notion.infrastructure.trainee_repository import create_notion_trainee_adapter
from src.platform.config import Settings, get_settings
from src.platform.logger import setup_logger
from src.services.notion import NotionClient

T = TypeVar("T")

METRIC_LABELS = {
    "training_distance": "Training distance",
    "training_intensity": "Intensity",
    "training_speed": "Speed",
    "total_o2_consumption": "O2 consumption",
    "caloric_expenditure": "Caloric expenditure",
    "weight_loss": "Weight loss",
}

MIN_INTENSITY_PERCENT = 0.1

COLLABORATOR_ERRORS = (HTTPException, httpx.HTTPError)
WORKFLOW_ERRORS = (
    TraineeNotFoundError,
    TraineeInactiveError,
    AssessmentTestNotFoundError,
    UnsuitableTestError,
    EvaluationInputError,
)


@st.cache_resource
def _settings() -> Settings:
    settings = get_settings()
    setup_logger(level=settings.log_level, log_file=settings.log_file)
    return settings


def _run(pending: Awaitable[T], failure_message: str) -> Optional[T]:
    """Await a collaborator call, reporting failures instead of raising."""

    try:
        return asyncio.run(pending)  # type: ignore[arg-type]
    except COLLABORATOR_ERRORS as exc:
        logger.error(f"{failure_message}: {exc}")
        st.error(failure_message)
        return None


def _test_label(test: PerformanceTest) -> str:
    label = f"{test.test_date:%d/%m/%Y} - {test.cooper_distance_m:g} m"
    if test.vo2_max:
        label += f" (VO2: {test.vo2_max:g})"
    return label


def _compute_metrics(
    test: PerformanceTest,
    trainee: Trainee,
    intensity: Optional[float],
    training_time: Optional[float],
    default_weight: float,
) -> Optional[DerivedMetrics]:
    """Recompute metrics from the current inputs; ``None`` until all are present."""

    if not intensity or not training_time:
        return None
    try:
        return calculate_performance_evaluation(
            test.cooper_distance_m,
            intensity,
            training_time,
            resolve_body_weight(trainee.weight_kg, default_weight),
        )
    except EvaluationInputError as exc:
        st.warning(str(exc))
        return None


def _show_metrics(metrics: DerivedMetrics) -> None:
    formatted = format_metrics_for_display(metrics)
    columns = st.columns(3)
    for index, (name, label) in enumerate(METRIC_LABELS.items()):
        columns[index % 3].metric(label, formatted[name])


def main() -> None:
    """Render the evaluation form."""

    st.set_page_config(page_title="Performance Evaluation", layout="centered")
    st.title("New performance evaluation")

    settings = _settings()
    client = NotionClient(settings=settings)
    trainee_repository = create_notion_trainee_adapter(settings=settings, client=client)
    test_repository = create_notion_test_adapter(settings=settings, client=client)
    evaluation_repository = create_notion_evaluation_adapter(settings=settings, client=client)

    trainees = _run(
        ListTraineesUseCase(trainee_repository)(active_only=True),
        "Could not load trainees",
    )
    if trainees is None:
        return

    trainee = st.selectbox(
        "Trainee *",
        trainees,
        index=None,
        format_func=lambda t: f"{t.name} - {t.email or 'no email'}",
        placeholder="Select a trainee",
    )
    if trainee is None:
        return

    tests = _run(
        ListCooperTestsUseCase(trainee_repository, test_repository)(trainee.id),
        "Could not load the trainee's tests",
    )
    if not tests:
        if tests is not None:
            st.warning("This trainee has no Cooper tests recorded.")
        return

    test = st.selectbox(
        "Cooper test *",
        tests,
        index=None,
        format_func=_test_label,
        placeholder="Select a Cooper test",
    )

    with st.container(border=True):
        st.markdown(f"**Name:** {trainee.name}  \n**Email:** {trainee.email or '-'}")
        weight_text = f"{trainee.weight_kg:g} kg" if trainee.weight_kg else "not recorded"
        st.markdown(f"**Weight:** {weight_text}")
        if test is not None:
            st.markdown(
                f"**VO2 max:** {test.vo2_max or 'not calculated'}  \n"
                f"**Cooper distance:** {test.cooper_distance_m:g} m"
            )

    if test is None:
        return

    left, right = st.columns(2)
    intensity = left.number_input(
        "Intensity (%) *",
        min_value=MIN_INTENSITY_PERCENT,
        max_value=100.0,
        step=0.1,
        value=None,
    )
    training_time = right.number_input(
        "Training time (minutes) *", min_value=1.0, step=0.1, value=None
    )
    test_date = st.date_input("Test date *", value=None)
    observations = st.text_area("Observations", placeholder="Notes about the evaluation...")

    metrics = _compute_metrics(
        test, trainee, intensity, training_time, settings.default_body_weight_kg
    )
    if metrics is not None:
        st.subheader("Calculated results")
        _show_metrics(metrics)

    ready = metrics is not None and test_date is not None
    if not st.button("Create evaluation", disabled=not ready, type="primary"):
        return

    submission = PerformanceEvaluationSubmission(
        trainee_id=trainee.id,
        test_id=test.id,
        intensity_percentage=intensity,
        training_time=training_time,
        test_date=test_date,
        observations=observations,
    )
    create = CreatePerformanceEvaluationUseCase(
        preview=PreviewPerformanceEvaluationUseCase(
            trainee_repository=trainee_repository,
            test_repository=test_repository,
            default_body_weight_kg=settings.default_body_weight_kg,
        ),
        repository=evaluation_repository,
    )
    try:
        record = _run(create(submission), "Could not create the performance evaluation")
    except WORKFLOW_ERRORS as exc:
        st.error(str(exc))
        return
    if record is not None:
        st.success("Performance evaluation created.")


if __name__ == "__main__":
    main()
