"""
Service module for estimating energy and mood across the cycle.
"""
import math
from typing import List, Optional

from src.models.phase import PhaseKey, PhaseRange, DayEstimate
from src.services.constants import (
    PHASE_ENERGY_MOOD,
    OVULATION_PEAK_ENERGY,
    OVULATION_ENERGY_SLOPE,
    OVULATION_PEAK_MOOD,
    OVULATION_MOOD_SLOPE,
    MOOD_EMOJIS,
    ENERGY_LEVELS,
)
from src.services.phase import get_phase_by_day, day_fraction_in_phase, lerp

def _round_half_up(value: float, digits: int = 0) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor

def suggest_for_day(
    day: int,
    ranges: List[PhaseRange],
    cycle_length: Optional[int] = None
) -> DayEstimate:
    """
    Estimate energy and mood for a cycle day.

    Energy and mood are interpolated across the containing phase: both rise
    through menstruation and the follicular phase, peak at ovulation and fall
    through the luteal phase.

    Args:
        day: Day in the cycle (1-based)
        ranges: Top-level phase ranges
        cycle_length: Optional cycle length; overdue days use the luteal phase

    Returns:
        DayEstimate with energy rounded to an integer and mood to one decimal

    Raises:
        EmptyPhaseRangesError: If ``ranges`` is empty

    Example:
        >>> estimate = suggest_for_day(1, get_phase_ranges(28, 5))
        >>> estimate.energy, estimate.mood
        (30, 2.3)
    """
    phase = get_phase_by_day(day, ranges, cycle_length)
    f = day_fraction_in_phase(day, phase)

    if phase.key == PhaseKey.OVULATION:
        distance = abs(f - 0.5)
        energy = OVULATION_PEAK_ENERGY - distance * OVULATION_ENERGY_SLOPE
        mood = OVULATION_PEAK_MOOD - distance * OVULATION_MOOD_SLOPE
    else:
        curve = PHASE_ENERGY_MOOD[phase.key]
        energy = lerp(*curve["energy"], f)
        mood = lerp(*curve["mood"], f)

    return DayEstimate(
        phase_key=phase.key,
        energy=int(_round_half_up(energy)),
        mood=_round_half_up(mood, 1)
    )

def get_mood_emoji(mood: float) -> str:
    """Emoji for a mood score on the 1-5 scale."""
    for threshold, emoji in MOOD_EMOJIS:
        if mood >= threshold:
            return emoji
    return MOOD_EMOJIS[-1][1]

def get_energy_level(energy: int) -> str:
    """Label for an energy score on the 0-100 scale."""
    for threshold, label in ENERGY_LEVELS:
        if energy >= threshold:
            return label
    return ENERGY_LEVELS[-1][1]
