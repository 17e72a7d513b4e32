from .assessment import COOPER_TEST_TYPE, TEST_TYPE_LABELS, PerformanceTest
from .evaluation import (
    DerivedMetricsResponse,
    MetricCalculationRequest,
    PerformanceEvaluationRecord,
    PerformanceEvaluationSubmission,
)
from .responses import OperationStatus
from .trainee import Trainee, TraineeStatusUpdate

__all__ = [
    'COOPER_TEST_TYPE',
    'TEST_TYPE_LABELS',
    'PerformanceTest',
    'DerivedMetricsResponse',
    'MetricCalculationRequest',
    'PerformanceEvaluationRecord',
    'PerformanceEvaluationSubmission',
    'OperationStatus',
    'Trainee',
    'TraineeStatusUpdate',
]
