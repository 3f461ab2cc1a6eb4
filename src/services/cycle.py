"""
Service module for cycle calendar calculations.

This module maps calendar dates onto the cycle grid anchored at the last
period start: the current cycle day, predicted ovulation and next period,
the fertile window and per-date checks used to mark a calendar.

Typical usage:
    config = CycleConfiguration(last_period_start=date(2024, 3, 1))
    state = get_derived_state(config)
    dates = get_cycle_dates(config)
    if is_fertility_date(some_date, config.last_period_start, config.cycle_length):
        ...
"""
from typing import Optional, Tuple
from datetime import date, timedelta

from aws_lambda_powertools import Logger

from src.config import HISTORY_WINDOW_DAYS
from src.models.cycle import CycleConfiguration, DerivedState, CycleDates
from src.models.phase import DayRange
from src.services.constants import (
    LUTEAL_LENGTH,
    MIN_CYCLE_LENGTH,
    MAX_CYCLE_LENGTH,
    MIN_PERIOD_LENGTH,
    MAX_PERIOD_LENGTH,
    FERTILE_DAYS_BEFORE_OVULATION,
    FERTILE_DAYS_AFTER_OVULATION,
)
from src.services.exceptions import CycleNotStartedError
from src.services.phase import get_phase_by_day
from src.services.ranges import get_phase_ranges

logger = Logger()

def clamp_cycle_length(cycle_length: int) -> int:
    """Clamp a cycle length to the supported 21-45 day range."""
    return max(MIN_CYCLE_LENGTH, min(MAX_CYCLE_LENGTH, cycle_length))

def clamp_period_length(period_length: int) -> int:
    """Clamp a period length to the supported 2-10 day range."""
    return max(MIN_PERIOD_LENGTH, min(MAX_PERIOD_LENGTH, period_length))

def get_current_cycle_day(last_period_start: date, today: date) -> int:
    """
    Calculate the cycle day of ``today``.

    The count does not wrap at the end of the cycle: a late period keeps
    producing days 29, 30, ... until a new start date is entered.

    Example:
        >>> get_current_cycle_day(date(2024, 3, 1), date(2024, 3, 1))
        1
    """
    return (today - last_period_start).days + 1

def get_ovulation_day(cycle_length: int) -> int:
    """Ovulation falls 14 days before the next period."""
    return cycle_length - LUTEAL_LENGTH

def get_fertility_window(cycle_length: int) -> DayRange:
    """
    Get the 7-day fertile window as cycle days.

    Five days before ovulation through one day after it.
    """
    ovulation_day = get_ovulation_day(cycle_length)
    return DayRange(
        start=ovulation_day - FERTILE_DAYS_BEFORE_OVULATION,
        end=ovulation_day + FERTILE_DAYS_AFTER_OVULATION
    )

def get_fertility_dates(last_period_start: date, cycle_length: int) -> Tuple[date, date]:
    """Calendar start and end of the fertile window in the current cycle."""
    window = get_fertility_window(cycle_length)
    return (
        last_period_start + timedelta(days=window.start - 1),
        last_period_start + timedelta(days=window.end - 1)
    )

def get_ovulation_date(last_period_start: date, cycle_length: int) -> date:
    """Calendar date of ovulation in the current cycle."""
    return last_period_start + timedelta(days=get_ovulation_day(cycle_length) - 1)

def get_next_period_date(last_period_start: date, cycle_length: int) -> date:
    """Predicted start of the next period."""
    return last_period_start + timedelta(days=cycle_length)

def _day_in_cycle(target: date, last_period_start: date, cycle_length: int) -> int:
    """1-based position of any date, past or future, on the repeating cycle grid."""
    return (target - last_period_start).days % cycle_length + 1

def is_period_date(
    target: date,
    last_period_start: Optional[date],
    cycle_length: int,
    period_length: int
) -> bool:
    """
    Check whether a date falls on a (past, current or predicted) period day.

    Returns False when no period start is known.
    """
    if not last_period_start:
        return False
    return _day_in_cycle(target, last_period_start, cycle_length) <= period_length

def is_fertility_date(target: date, last_period_start: Optional[date], cycle_length: int) -> bool:
    """Check whether a date falls inside the fertile window of its cycle."""
    if not last_period_start:
        return False
    return get_fertility_window(cycle_length).contains(
        _day_in_cycle(target, last_period_start, cycle_length)
    )

def is_ovulation_date(target: date, last_period_start: Optional[date], cycle_length: int) -> bool:
    """Check whether a date is the ovulation day of its cycle."""
    if not last_period_start:
        return False
    return _day_in_cycle(target, last_period_start, cycle_length) == get_ovulation_day(cycle_length)

def validate_date(target: date, min_date: date, max_date: date) -> bool:
    """Check that a date lies within ``[min_date, max_date]``."""
    return min_date <= target <= max_date

def get_derived_state(config: CycleConfiguration, today: Optional[date] = None) -> DerivedState:
    """
    Derive the cycle state as seen from a given day.

    Args:
        config: Cycle settings
        today: Reference date, defaults to the current date

    Returns:
        DerivedState with the editable date window, the current cycle day
        (1 when no period start is known) and its phase
    """
    if today is None:
        today = date.today()

    current_day = (
        get_current_cycle_day(config.last_period_start, today)
        if config.last_period_start
        else 1
    )
    phase_ranges = get_phase_ranges(config.cycle_length, config.period_length)
    current_phase = get_phase_by_day(current_day, phase_ranges, config.cycle_length)

    logger.debug("Derived cycle state", extra={
        "today": today.isoformat(),
        "current_day": current_day,
        "phase": current_phase.key.value
    })

    return DerivedState(
        today=today,
        min_date=today - timedelta(days=HISTORY_WINDOW_DAYS),
        max_date=today,
        current_day=current_day,
        phase_ranges=phase_ranges,
        current_phase=current_phase,
        is_first_run=config.last_period_start is None
    )

def get_cycle_dates(config: CycleConfiguration) -> CycleDates:
    """
    Predict the key calendar dates of the current cycle.

    The fertile window is clamped to the days of the cycle, so it never
    starts before the period start or ends after the cycle.

    Raises:
        CycleNotStartedError: If no last period start is configured
    """
    if config.last_period_start is None:
        raise CycleNotStartedError("Cannot predict dates without a last period start")

    start = config.last_period_start
    window = get_fertility_window(config.cycle_length)
    fertile_first = max(1, window.start)
    fertile_last = min(config.cycle_length, window.end)

    return CycleDates(
        next_period=get_next_period_date(start, config.cycle_length),
        ovulation=get_ovulation_date(start, config.cycle_length),
        fertile_start=start + timedelta(days=fertile_first - 1),
        fertile_end=start + timedelta(days=fertile_last - 1)
    )
