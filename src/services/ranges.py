"""
Service module for partitioning a cycle into phases and subphases.

Phase boundaries are derived purely from the cycle length and the period
length: the luteal phase always spans the final 14 days, ovulation is the
single day before it, menstruation covers the first ``period_length`` days
and the follicular phase fills whatever remains in between.

Typical usage:
    >>> ranges = get_phase_ranges(28, 5)
    >>> detailed = get_detailed_phase_ranges(28, 5)
    >>> detailed["luteal_early"]
    DayRange(start=15, end=18)
"""
import math
from typing import List, Sequence, Tuple

from aws_lambda_powertools import Logger

from src.models.phase import PhaseKey, PhaseRange, DayRange, DetailedRanges
from src.services.constants import (
    LUTEAL_LENGTH,
    PHASE_LABELS,
    MENSTRUAL_SPLIT,
    LUTEAL_SPLIT,
    MENSTRUAL_MIN_SPLIT_LENGTH,
    SHORT_FOLLICULAR_LENGTH,
    SHORT_FOLLICULAR_MID_SHARE,
    FOLLICULAR_TRANSITION_SHARE,
    FOLLICULAR_MID_SHARE,
    FOLLICULAR_MIN_TRANSITION,
    FOLLICULAR_MIN_MID,
    FOLLICULAR_MIN_LATE,
)

logger = Logger()

# Order in which excess days are removed from the three parts
_TRIM_ORDER = {
    "mid": (1, 0, 2),
    "first": (0, 1, 2),
}

def split_segment(
    length: int,
    percentages: Sequence[float],
    minimums: Sequence[int],
    prefer: str = "mid"
) -> Tuple[int, int, int]:
    """
    Split a segment into three parts that honor minimum lengths.

    Raw parts are floored from the percentages (the third part takes the
    remainder), then raised to their minimums. Any excess is trimmed in
    ``prefer`` order without going below a minimum; any shortfall is added
    to the middle part. When the minimums alone do not fit, parts are trimmed
    further in the same order, so the lengths always sum to ``length`` and a
    part may end up empty.

    Args:
        length: Total number of days to split
        percentages: Target share of each part
        minimums: Minimum length of each part
        prefer: "mid" to trim the middle part first, "first" to trim the first

    Returns:
        Tuple of three part lengths

    Raises:
        ValueError: If ``prefer`` is not a known trim order

    Example:
        >>> split_segment(14, (0.35, 0.40, 0.25), (2, 2, 2))
        (4, 5, 5)
    """
    if prefer not in _TRIM_ORDER:
        raise ValueError(f"Unknown trim preference: {prefer}")

    r1 = math.floor(length * percentages[0])
    r2 = math.floor(length * percentages[1])
    r3 = length - r1 - r2

    parts = [
        max(r1, minimums[0]),
        max(r2, minimums[1]),
        max(r3, minimums[2]),
    ]
    total = sum(parts)

    if total > length:
        remaining = total - length
        # Second pass only runs when the minimums alone exceed the length
        for floors in (minimums, (0, 0, 0)):
            for i in _TRIM_ORDER[prefer]:
                take = min(remaining, parts[i] - floors[i])
                parts[i] -= take
                remaining -= take
            if remaining == 0:
                break
    elif total < length:
        parts[1] += length - total

    return parts[0], parts[1], parts[2]

def get_phase_ranges(cycle_length: int, period_length: int) -> List[PhaseRange]:
    """
    Get the four top-level phase ranges of a cycle.

    Args:
        cycle_length: Days per cycle
        period_length: Days of menstrual bleeding

    Returns:
        Menstrual, follicular, ovulation and luteal ranges, in that order

    Example:
        >>> [(r.start, r.end) for r in get_phase_ranges(28, 5)]
        [(1, 5), (6, 13), (14, 14), (15, 28)]
    """
    ovulation_day = cycle_length - LUTEAL_LENGTH
    luteal_start = cycle_length - LUTEAL_LENGTH + 1

    return [
        PhaseRange(key=PhaseKey.MENSTRUAL, name=PHASE_LABELS[PhaseKey.MENSTRUAL],
                   start=1, end=period_length),
        PhaseRange(key=PhaseKey.FOLLICULAR, name=PHASE_LABELS[PhaseKey.FOLLICULAR],
                   start=period_length + 1, end=ovulation_day - 1),
        PhaseRange(key=PhaseKey.OVULATION, name=PHASE_LABELS[PhaseKey.OVULATION],
                   start=ovulation_day, end=ovulation_day),
        PhaseRange(key=PhaseKey.LUTEAL, name=PHASE_LABELS[PhaseKey.LUTEAL],
                   start=luteal_start, end=cycle_length),
    ]

def _split_follicular(length: int) -> Tuple[int, int, int]:
    """Split the displayable follicular phase into transition, mid and late."""
    if length <= 0:
        return 0, 0, 0

    if length <= SHORT_FOLLICULAR_LENGTH:
        mid = max(1, math.floor(length * SHORT_FOLLICULAR_MID_SHARE))
        late = length - mid
        if late == 0 and mid > 1:
            mid -= 1
            late += 1
        return 0, mid, late

    transition = max(FOLLICULAR_MIN_TRANSITION, math.floor(length * FOLLICULAR_TRANSITION_SHARE))
    mid = max(FOLLICULAR_MIN_MID, math.floor(length * FOLLICULAR_MID_SHARE))
    late = length - transition - mid

    if late < FOLLICULAR_MIN_LATE and mid > FOLLICULAR_MIN_MID:
        borrow = min(FOLLICULAR_MIN_LATE - late, mid - FOLLICULAR_MIN_MID)
        mid -= borrow
        late += borrow
    if late < FOLLICULAR_MIN_LATE and transition > FOLLICULAR_MIN_TRANSITION:
        borrow = min(FOLLICULAR_MIN_LATE - late, transition - FOLLICULAR_MIN_TRANSITION)
        transition -= borrow
        late += borrow

    return transition, mid, late

def _lay_out(ranges: DetailedRanges, start: int, segments: Sequence[Tuple[str, int]]) -> None:
    """Place consecutive segments from ``start``, skipping empty ones."""
    cursor = start
    for key, length in segments:
        if length > 0:
            ranges[key] = DayRange(start=cursor, end=cursor + length - 1)
            cursor += length

def get_detailed_phase_ranges(
    cycle_length: int,
    period_length: int,
    luteal_length: int = LUTEAL_LENGTH
) -> DetailedRanges:
    """
    Calculate phase and subphase ranges for a cycle.

    Keys are the top-level phase names plus ``<phase>_<subphase>`` entries
    (``follicular_transition`` for the first follicular segment). A key is
    absent when that segment does not occur in this cycle, e.g. every
    ``follicular*`` key for a cycle too short to have a follicular phase.

    Args:
        cycle_length: Days per cycle
        period_length: Days of menstrual bleeding
        luteal_length: Days in the luteal phase including ovulation offset

    Returns:
        Mapping of range key to DayRange

    Example:
        >>> detailed = get_detailed_phase_ranges(30, 4)
        >>> detailed["luteal_early"], detailed["luteal_late"]
        (DayRange(start=17, end=20), DayRange(start=26, end=30))
    """
    ovulation_day = cycle_length - luteal_length

    menstrual = DayRange(start=1, end=period_length)
    follicular = DayRange(start=period_length + 1, end=ovulation_day - 1)
    luteal = DayRange(start=ovulation_day + 1, end=cycle_length)

    if menstrual.length >= MENSTRUAL_MIN_SPLIT_LENGTH:
        m_early, m_mid, m_late = split_segment(menstrual.length, *MENSTRUAL_SPLIT, prefer="mid")
    else:
        m_early, m_mid, m_late = menstrual.length, 0, 0

    f_transition, f_mid, f_late = _split_follicular(follicular.length)
    l_early, l_mid, l_late = split_segment(luteal.length, *LUTEAL_SPLIT, prefer="mid")

    ranges: DetailedRanges = {
        "menstrual": menstrual,
        "ovulation": DayRange(start=ovulation_day, end=ovulation_day),
    }
    _lay_out(ranges, menstrual.start, [
        ("menstrual_early", m_early),
        ("menstrual_mid", m_mid),
        ("menstrual_late", m_late),
    ])

    if follicular.length > 0:
        ranges["follicular"] = follicular
        _lay_out(ranges, follicular.start, [
            ("follicular_transition", f_transition),
            ("follicular_mid", f_mid),
            ("follicular_late", f_late),
        ])

    ranges["luteal"] = luteal
    _lay_out(ranges, luteal.start, [
        ("luteal_early", l_early),
        ("luteal_mid", l_mid),
        ("luteal_late", l_late),
    ])

    logger.debug("Calculated detailed phase ranges", extra={
        "cycle_length": cycle_length,
        "period_length": period_length,
        "range_keys": list(ranges.keys())
    })
    return ranges
