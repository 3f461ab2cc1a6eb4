"""
Model definitions for a composed daily plan.
"""
from datetime import date
from typing import List, Optional
from pydantic import BaseModel, computed_field

from src.models.phase import PhaseKey, Subphase, DayEstimate, PhaseRange
from src.models.content import NutritionSelection, MovementSelection

class PhaseInsight(BaseModel):
    """
    General guidance for a top-level phase.
    """
    title: str
    description: str
    recommendations: List[str]
    energy: str
    mood: str

class DailyPlan(BaseModel):
    """
    Everything shown for one day of the cycle.
    """
    plan_date: date
    cycle_day: int
    cycle_length: int
    phase: PhaseKey
    subphase: Optional[Subphase] = None
    phase_range: PhaseRange
    estimate: DayEstimate
    insight: PhaseInsight
    nutrition: NutritionSelection
    nutrition_text: str
    movement: MovementSelection
    movement_text: str
    next_period: Optional[date] = None

    @computed_field
    @property
    def is_overdue(self) -> bool:
        """Check if the predicted period start has already passed."""
        return self.cycle_day > self.cycle_length
