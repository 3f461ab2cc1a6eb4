"""
Phase model definitions for menstrual cycle phases and day estimates.
"""
from enum import Enum
from typing import Dict, Optional
from pydantic import BaseModel, Field

class PhaseKey(str, Enum):
    """
    Top-level menstrual cycle phases.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"

class Subphase(str, Enum):
    """
    Position inside a top-level phase. Ovulation has no subphase.
    """
    EARLY = "early"
    MID = "mid"
    LATE = "late"

class DayRange(BaseModel):
    """
    Inclusive, 1-indexed range of cycle days.
    """
    start: int
    end: int

    @property
    def length(self) -> int:
        """Number of days in the range (zero or negative when degenerate)."""
        return self.end - self.start + 1

    def contains(self, day: int) -> bool:
        return self.start <= day <= self.end

class PhaseRange(DayRange):
    """
    Represents one top-level phase of a cycle.
    """
    key: PhaseKey
    name: str

# Range key (e.g. "luteal_early") -> day range. Missing keys do not occur this cycle.
DetailedRanges = Dict[str, DayRange]

class SubphaseInfo(BaseModel):
    """Phase and subphase a single cycle day falls into."""
    phase: PhaseKey
    subphase: Optional[Subphase] = None

class DayEstimate(BaseModel):
    """
    Estimated energy and mood for a cycle day.
    """
    phase_key: PhaseKey
    energy: int = Field(..., ge=0, le=100)
    mood: float = Field(..., ge=1.0, le=5.0)
