"""
Tests for cycle calendar calculations.
"""
import pytest
from datetime import date, timedelta
from pydantic import ValidationError

from src.models.cycle import CycleConfiguration
from src.models.phase import PhaseKey, DayRange
from src.services.cycle import (
    clamp_cycle_length,
    clamp_period_length,
    get_current_cycle_day,
    get_ovulation_day,
    get_fertility_window,
    get_fertility_dates,
    get_ovulation_date,
    get_next_period_date,
    is_period_date,
    is_fertility_date,
    is_ovulation_date,
    validate_date,
    get_derived_state,
    get_cycle_dates,
)
from src.services.exceptions import CycleNotStartedError

START = date(2024, 3, 1)

def test_clamp_lengths():
    """Test clamping settings to the supported ranges."""
    assert clamp_cycle_length(15) == 21
    assert clamp_cycle_length(28) == 28
    assert clamp_cycle_length(60) == 45
    assert clamp_period_length(1) == 2
    assert clamp_period_length(5) == 5
    assert clamp_period_length(14) == 10

def test_configuration_rejects_out_of_range_lengths():
    """Test validation of cycle settings."""
    with pytest.raises(ValidationError):
        CycleConfiguration(cycle_length=20)
    with pytest.raises(ValidationError):
        CycleConfiguration(period_length=11)

@pytest.mark.parametrize("cycle_length,period_length", [(21, 10), (21, 7), (24, 10)])
def test_configuration_rejects_period_overlapping_ovulation(cycle_length, period_length):
    """Test that the period must end before the ovulation day."""
    with pytest.raises(ValidationError, match="does not fit"):
        CycleConfiguration(cycle_length=cycle_length, period_length=period_length)

@pytest.mark.parametrize("cycle_length,period_length", [(21, 6), (25, 10), (28, 5)])
def test_configuration_accepts_period_before_ovulation(cycle_length, period_length):
    """Test the longest periods each cycle length allows."""
    config = CycleConfiguration(cycle_length=cycle_length, period_length=period_length)

    assert config.period_length == period_length

def test_current_cycle_day_keeps_counting_when_late():
    """Test that the cycle day does not wrap after the expected period."""
    assert get_current_cycle_day(START, START) == 1
    assert get_current_cycle_day(START, date(2024, 3, 15)) == 15
    assert get_current_cycle_day(START, date(2024, 4, 2)) == 33

def test_ovulation_and_fertile_window():
    """Test ovulation day and the 7-day fertile window."""
    assert get_ovulation_day(28) == 14
    assert get_ovulation_day(35) == 21
    assert get_fertility_window(28) == DayRange(start=9, end=15)
    assert get_fertility_window(28).length == 7

def test_predicted_dates():
    """Test calendar predictions from the last period start."""
    assert get_ovulation_date(START, 28) == date(2024, 3, 14)
    assert get_next_period_date(START, 28) == date(2024, 3, 29)
    assert get_fertility_dates(START, 28) == (date(2024, 3, 9), date(2024, 3, 15))

@pytest.mark.parametrize("target,expected", [
    (date(2024, 3, 1), True),
    (date(2024, 3, 5), True),
    (date(2024, 3, 6), False),
    (date(2024, 3, 29), True),
    (date(2024, 4, 2), True),
    (date(2024, 4, 3), False),
    (date(2024, 2, 2), True),
    (date(2024, 2, 1), False),
    (date(2024, 2, 6), True),
])
def test_is_period_date(target, expected):
    """Test period days in the current, future and past cycles."""
    assert is_period_date(target, START, 28, 5) is expected

@pytest.mark.parametrize("target,expected", [
    (date(2024, 3, 8), False),
    (date(2024, 3, 9), True),
    (date(2024, 3, 15), True),
    (date(2024, 3, 16), False),
    (date(2024, 4, 10), True),
    (date(2024, 2, 12), True),
])
def test_is_fertility_date(target, expected):
    """Test fertile days in the current, future and past cycles."""
    assert is_fertility_date(target, START, 28) is expected

def test_is_ovulation_date():
    """Test ovulation days repeat every cycle in both directions."""
    assert is_ovulation_date(date(2024, 3, 14), START, 28)
    assert is_ovulation_date(date(2024, 4, 11), START, 28)
    assert is_ovulation_date(date(2024, 2, 15), START, 28)
    assert not is_ovulation_date(date(2024, 3, 13), START, 28)

def test_date_checks_without_period_start():
    """Test that nothing is marked before a period has been entered."""
    assert not is_period_date(START, None, 28, 5)
    assert not is_fertility_date(START, None, 28)
    assert not is_ovulation_date(START, None, 28)

def test_validate_date_is_inclusive():
    """Test date window validation."""
    assert validate_date(date(2024, 1, 1), date(2024, 1, 1), date(2024, 1, 31))
    assert validate_date(date(2024, 1, 31), date(2024, 1, 1), date(2024, 1, 31))
    assert not validate_date(date(2023, 12, 31), date(2024, 1, 1), date(2024, 1, 31))
    assert not validate_date(date(2024, 2, 1), date(2024, 1, 1), date(2024, 1, 31))

def test_derived_state(regular_config):
    """Test the state derived for a day in the follicular phase."""
    today = date(2024, 3, 10)
    state = get_derived_state(regular_config, today)

    assert state.today == today
    assert state.min_date == today - timedelta(days=90)
    assert state.max_date == today
    assert state.current_day == 10
    assert state.current_phase.key == PhaseKey.FOLLICULAR
    assert len(state.phase_ranges) == 4
    assert not state.is_first_run

def test_derived_state_first_run(first_run_config):
    """Test the state before any period has been entered."""
    state = get_derived_state(first_run_config, date(2024, 3, 10))

    assert state.current_day == 1
    assert state.current_phase.key == PhaseKey.MENSTRUAL
    assert state.is_first_run

def test_derived_state_late_period(regular_config):
    """Test that an overdue day stays in the luteal phase."""
    state = get_derived_state(regular_config, date(2024, 4, 5))

    assert state.current_day == 36
    assert state.current_phase.key == PhaseKey.LUTEAL

def test_get_cycle_dates(long_config):
    """Test the predicted dates of a 30-day cycle."""
    dates = get_cycle_dates(long_config)

    assert dates.next_period == date(2024, 3, 31)
    assert dates.ovulation == date(2024, 3, 16)
    assert dates.fertile_start == date(2024, 3, 11)
    assert dates.fertile_end == date(2024, 3, 17)

def test_get_cycle_dates_requires_period_start(first_run_config):
    """Test that predictions need a last period start."""
    with pytest.raises(CycleNotStartedError):
        get_cycle_dates(first_run_config)
