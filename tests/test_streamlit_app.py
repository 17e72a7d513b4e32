from __future__ import annotations

from datetime import date

import pytest

from src.models.assessment import PerformanceTest
from src.models.trainee import Trainee
from src.streamlit_app import MIN_INTENSITY_PERCENT, _compute_metrics


@pytest.fixture
def cooper_test() -> PerformanceTest:
    return PerformanceTest(
        id="test-1",
        trainee_id="trainee-1",
        test_type="cooper",
        test_date=date(2024, 3, 1),
        cooper_distance_m=2400,
    )


@pytest.fixture
def trainee() -> Trainee:
    return Trainee(id="trainee-1", name="Ana Lima")


def test_intensity_input_allows_fractions_of_a_percent() -> None:
    assert 0 < MIN_INTENSITY_PERCENT < 1


@pytest.mark.parametrize("intensity", [MIN_INTENSITY_PERCENT, 0.5, 5.0])
def test_low_intensities_produce_metrics(
    cooper_test: PerformanceTest, trainee: Trainee, intensity: float
) -> None:
    metrics = _compute_metrics(cooper_test, trainee, intensity, 30.0, 70.0)

    assert metrics is not None
    assert metrics.training_intensity == intensity
    assert metrics.training_speed > 0


def test_metrics_wait_for_every_input(cooper_test: PerformanceTest, trainee: Trainee) -> None:
    assert _compute_metrics(cooper_test, trainee, None, 30.0, 70.0) is None
    assert _compute_metrics(cooper_test, trainee, 75.0, None, 70.0) is None
