from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field


class Trainee(BaseModel):
    """A person whose fitness is being assessed."""

    id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None
    birth_date: Optional[date] = None
    address: Optional[str] = None
    weight_kg: Optional[float] = Field(
        None, description="Recorded body weight in kilograms, when known."
    )
    is_active: bool = True

    def age_on(self, day: date) -> Optional[int]:
        """Return the age in whole years on ``day``."""

        if self.birth_date is None:
            return None
        birth = self.birth_date
        age = day.year - birth.year
        if (day.month, day.day) < (birth.month, birth.day):
            age -= 1
        return age


class TraineeStatusUpdate(BaseModel):
    is_active: bool
