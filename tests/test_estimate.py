"""
Tests for energy and mood estimates.
"""
import pytest

from src.models.phase import PhaseKey
from src.services.estimate import suggest_for_day, get_mood_emoji, get_energy_level
from src.services.exceptions import EmptyPhaseRangesError
from src.services.ranges import get_phase_ranges

@pytest.mark.parametrize("cycle_length,period_length", [(21, 3), (28, 5), (30, 4), (35, 7), (45, 10)])
def test_estimates_stay_in_bounds(cycle_length, period_length):
    """Test energy and mood bounds on every day of a cycle."""
    ranges = get_phase_ranges(cycle_length, period_length)

    for day in range(1, cycle_length + 1):
        estimate = suggest_for_day(day, ranges, cycle_length)
        assert 0 <= estimate.energy <= 100
        assert 1.0 <= estimate.mood <= 5.0

@pytest.mark.parametrize("day,energy,mood", [
    (1, 30, 2.3),
    (5, 45, 3.0),
    (6, 50, 3.3),
    (15, 70, 4.0),
    (28, 35, 2.6),
])
def test_phase_endpoints(regular_ranges, day, energy, mood):
    """Test the first and last day of each phase."""
    estimate = suggest_for_day(day, regular_ranges, 28)

    assert estimate.energy == energy
    assert estimate.mood == pytest.approx(mood)

def test_ovulation_estimate(regular_ranges):
    """Test the single-day ovulation phase."""
    estimate = suggest_for_day(14, regular_ranges, 28)

    assert estimate.phase_key == PhaseKey.OVULATION
    assert estimate.energy == 86
    assert estimate.mood > 4.5

def test_energy_rises_through_follicular_phase(regular_ranges):
    """Test that energy increases day by day before ovulation."""
    energies = [suggest_for_day(day, regular_ranges, 28).energy for day in range(6, 14)]

    assert energies == sorted(energies)
    assert energies[0] < energies[-1]

def test_overdue_day_uses_luteal_end(regular_ranges):
    """Test that a late period keeps the low end of the luteal curve."""
    estimate = suggest_for_day(33, regular_ranges, 28)

    assert estimate.phase_key == PhaseKey.LUTEAL
    assert estimate.energy == 35

def test_empty_ranges_raise():
    """Test that estimating without phase ranges fails."""
    with pytest.raises(EmptyPhaseRangesError):
        suggest_for_day(1, [])

@pytest.mark.parametrize("mood,emoji", [(4.8, "🤩"), (4.0, "🙂"), (3.0, "😕"), (1.5, "😞")])
def test_get_mood_emoji(mood, emoji):
    """Test mood emoji thresholds."""
    assert get_mood_emoji(mood) == emoji

@pytest.mark.parametrize("energy,level", [(86, "high"), (70, "good"), (45, "moderate"), (30, "low")])
def test_get_energy_level(energy, level):
    """Test energy level labels."""
    assert get_energy_level(energy) == level
