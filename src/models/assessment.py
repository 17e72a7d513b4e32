from __future__ import annotations

from datetime import date
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, computed_field

COOPER_TEST_TYPE = "cooper"

TEST_TYPE_LABELS: Dict[str, str] = {
    "cooper": "Cooper Test",
    "vo2_max": "VO2 Max",
    "flexibility": "Flexibility",
    "strength": "Strength",
}


class PerformanceTest(BaseModel):
    """A recorded fitness test taken by a trainee."""

    id: str
    trainee_id: str
    test_type: str = Field(..., description="Test kind, e.g. cooper, vo2_max, flexibility.")
    test_date: date
    cooper_distance_m: Optional[float] = Field(
        None, description="Distance covered in the 12-minute Cooper run, in metres."
    )
    vo2_max: Optional[float] = Field(
        None, description="VO2max recorded with the test in mL/kg/min."
    )
    flexibility_score: Optional[float] = None
    strength_score: Optional[float] = None
    duration_minutes: Optional[float] = None
    notes: Optional[str] = None

    def is_type(self, test_type: str) -> bool:
        return self.test_type.lower() == test_type.lower()

    @property
    def is_cooper_with_distance(self) -> bool:
        """True for Cooper tests that can feed a performance evaluation."""

        return self.is_type(COOPER_TEST_TYPE) and bool(self.cooper_distance_m)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def type_label(self) -> str:
        return TEST_TYPE_LABELS.get(self.test_type.lower(), self.test_type)

    def _scores(self) -> List[float]:
        values = (
            self.cooper_distance_m,
            self.vo2_max,
            self.flexibility_score,
            self.strength_score,
        )
        return [value for value in values if value]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def metrics_count(self) -> int:
        return len(self._scores())

    @computed_field  # type: ignore[prop-decorator]
    @property
    def average_score(self) -> Optional[float]:
        """Mean of the recorded metrics rounded to one decimal."""

        scores = self._scores()
        if not scores:
            return None
        return round(sum(scores) / len(scores), 1)
