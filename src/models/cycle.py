"""
Cycle configuration and derived calendar state models.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, Field, model_validator

from src.config import DEFAULT_CYCLE_LENGTH, DEFAULT_PERIOD_LENGTH
from src.models.phase import PhaseRange

# Luteal phase is fixed; ovulation falls the day before it starts
LUTEAL_LENGTH = 14

class CycleConfiguration(BaseModel):
    """
    User supplied cycle settings. Immutable per calculation.
    """
    last_period_start: Optional[date] = None
    cycle_length: int = Field(DEFAULT_CYCLE_LENGTH, ge=21, le=45)
    period_length: int = Field(DEFAULT_PERIOD_LENGTH, ge=2, le=10)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_phases_fit(self) -> "CycleConfiguration":
        # Menstruation must end before ovulation, 14 days before the cycle end
        if self.period_length > self.cycle_length - LUTEAL_LENGTH - 1:
            raise ValueError(
                f"period of {self.period_length} days does not fit a {self.cycle_length}-day cycle"
            )
        return self

class DerivedState(BaseModel):
    """
    Snapshot of the cycle as seen from a given day.
    """
    today: date
    min_date: date  # Oldest date a user may log
    max_date: date
    current_day: int
    phase_ranges: List[PhaseRange]
    current_phase: PhaseRange
    is_first_run: bool

class CycleDates(BaseModel):
    """
    Calendar dates predicted from the last period start.
    """
    next_period: date
    ovulation: date
    fertile_start: date
    fertile_end: date
