"""
Service module for locating cycle days within phases and subphases.

Typical usage:
    >>> ranges = get_phase_ranges(28, 5)
    >>> phase = get_phase_by_day(10, ranges)
    >>> info = get_subphase(10, 28, 5)
    >>> f = day_fraction_in_phase(10, phase)
"""
from typing import List, Optional

from aws_lambda_powertools import Logger

from src.models.phase import PhaseKey, Subphase, PhaseRange, SubphaseInfo, DetailedRanges
from src.services.exceptions import EmptyPhaseRangesError
from src.services.ranges import get_detailed_phase_ranges

logger = Logger()

# Scan order for subphase lookup. The follicular transition is reported as "mid".
SUBPHASE_LOOKUP = [
    ("menstrual_early", PhaseKey.MENSTRUAL, Subphase.EARLY),
    ("menstrual_mid", PhaseKey.MENSTRUAL, Subphase.MID),
    ("menstrual_late", PhaseKey.MENSTRUAL, Subphase.LATE),
    ("follicular_transition", PhaseKey.FOLLICULAR, Subphase.MID),
    ("follicular_mid", PhaseKey.FOLLICULAR, Subphase.MID),
    ("follicular_late", PhaseKey.FOLLICULAR, Subphase.LATE),
    ("ovulation", PhaseKey.OVULATION, None),
    ("luteal_early", PhaseKey.LUTEAL, Subphase.EARLY),
    ("luteal_mid", PhaseKey.LUTEAL, Subphase.MID),
    ("luteal_late", PhaseKey.LUTEAL, Subphase.LATE),
]

def get_phase_by_day(
    day: int,
    ranges: List[PhaseRange],
    cycle_length: Optional[int] = None
) -> PhaseRange:
    """
    Find the top-level phase containing a cycle day.

    When ``cycle_length`` is given and the day lies beyond it (the period is
    late), the luteal phase is returned instead of wrapping to day 1.

    Args:
        day: Day in the cycle (1-based)
        ranges: Top-level phase ranges
        cycle_length: Optional cycle length for the overdue check

    Returns:
        The first range containing the day, or the first range if none does

    Raises:
        EmptyPhaseRangesError: If ``ranges`` is empty
    """
    if not ranges:
        raise EmptyPhaseRangesError("Cannot look up a day without phase ranges")

    if cycle_length and day > cycle_length:
        for phase_range in ranges:
            if phase_range.key == PhaseKey.LUTEAL:
                return phase_range
        return ranges[-1]

    for phase_range in ranges:
        if phase_range.contains(day):
            return phase_range
    return ranges[0]

def find_subphase(day: int, ranges: DetailedRanges) -> SubphaseInfo:
    """
    Look up the phase and subphase of a day in a detailed range map.

    Args:
        day: Day in the cycle (1-based)
        ranges: Detailed ranges from ``get_detailed_phase_ranges``

    Returns:
        SubphaseInfo for the first matching segment, menstrual with no
        subphase when nothing matches
    """
    for key, phase, subphase in SUBPHASE_LOOKUP:
        day_range = ranges.get(key)
        if day_range is not None and day_range.contains(day):
            return SubphaseInfo(phase=phase, subphase=subphase)

    logger.debug("Day outside all subphase ranges", extra={"day": day})
    return SubphaseInfo(phase=PhaseKey.MENSTRUAL, subphase=None)

def get_subphase(day: int, cycle_length: int, period_length: int) -> SubphaseInfo:
    """
    Determine the phase and subphase for a cycle day.

    A day past the end of the cycle means the period is late; it stays in
    the late luteal subphase however far past the predicted start it is.

    Args:
        day: Day in the cycle (1-based, may exceed ``cycle_length``)
        cycle_length: Days per cycle
        period_length: Days of menstrual bleeding

    Returns:
        SubphaseInfo for the day

    Example:
        >>> get_subphase(20, 30, 4)
        SubphaseInfo(phase=<PhaseKey.LUTEAL: 'luteal'>, subphase=<Subphase.EARLY: 'early'>)
    """
    if day > cycle_length:
        return SubphaseInfo(phase=PhaseKey.LUTEAL, subphase=Subphase.LATE)

    return find_subphase(day, get_detailed_phase_ranges(cycle_length, period_length))

def lerp(a: float, b: float, t: float) -> float:
    """Linear interpolation between ``a`` and ``b``."""
    return a + (b - a) * t

def day_fraction_in_phase(day: int, phase: PhaseRange) -> float:
    """
    Position of a day inside its phase.

    Returns 0 on the first day and 1 on the last, linear in between and
    clamped to [0, 1]. A single-day phase always yields 0.
    """
    fraction = (day - phase.start) / max(1, phase.length - 1)
    return max(0.0, min(1.0, fraction))
