"""
Tests for composing and reporting daily plans.
"""
from datetime import date

from src.models.phase import PhaseKey, Subphase
from src.services.daily_plan import build_daily_plan, generate_daily_report

def test_build_daily_plan_for_today(regular_config):
    """Test the plan for the first luteal day of a 28/5 cycle."""
    plan = build_daily_plan(regular_config, today=date(2024, 3, 15))

    assert plan.plan_date == date(2024, 3, 15)
    assert plan.cycle_day == 15
    assert plan.phase == PhaseKey.LUTEAL
    assert plan.subphase == Subphase.EARLY
    assert plan.phase_range.start == 15
    assert plan.estimate.energy == 70
    assert plan.insight.title == "Winding down"
    assert plan.nutrition.master_key == "luteal_early"
    assert plan.movement.master_key == "luteal_early"
    assert plan.next_period == date(2024, 3, 29)
    assert not plan.is_overdue

def test_plan_texts_match_selections(regular_config):
    """Test that the rendered texts come from the stored selections."""
    plan = build_daily_plan(regular_config, today=date(2024, 3, 15))

    assert plan.nutrition_text.startswith("Today your body needs " + ", ".join(plan.nutrition.nutrients))
    assert plan.movement_text.split("\n")[0] == f"- {plan.movement.lines[0]}"

def test_build_daily_plan_is_repeatable(regular_config):
    """Test that planning the same day twice gives the same plan."""
    first = build_daily_plan(regular_config, today=date(2024, 3, 20))
    second = build_daily_plan(regular_config, today=date(2024, 3, 20))

    assert first.model_dump() == second.model_dump()

def test_build_daily_plan_for_other_day(regular_config):
    """Test previewing another cycle day."""
    plan = build_daily_plan(regular_config, today=date(2024, 3, 15), day=6)

    assert plan.plan_date == date(2024, 3, 6)
    assert plan.cycle_day == 6
    assert plan.phase == PhaseKey.FOLLICULAR
    assert plan.movement.is_cardio_day

def test_build_daily_plan_for_ovulation(regular_config):
    """Test that the ovulation day has no subphase."""
    plan = build_daily_plan(regular_config, today=date(2024, 3, 14))

    assert plan.phase == PhaseKey.OVULATION
    assert plan.subphase is None
    assert plan.estimate.energy == 86

def test_build_daily_plan_when_late(regular_config):
    """Test the plan when the period is overdue."""
    plan = build_daily_plan(regular_config, today=date(2024, 4, 5))

    assert plan.cycle_day == 36
    assert plan.phase == PhaseKey.LUTEAL
    assert plan.subphase == Subphase.LATE
    assert plan.is_overdue

def test_build_daily_plan_first_run(first_run_config):
    """Test the plan before any period has been entered."""
    plan = build_daily_plan(first_run_config, today=date(2024, 3, 15))

    assert plan.cycle_day == 1
    assert plan.phase == PhaseKey.MENSTRUAL
    assert plan.next_period is None

def test_generate_daily_report(regular_config):
    """Test the readable report sections."""
    plan = build_daily_plan(regular_config, today=date(2024, 3, 15))
    report = generate_daily_report(plan)

    assert report.startswith("🌙 Daily Plan for 2024-03-15")
    assert "Cycle day 15 of 28: Luteal (early)" in report
    assert "📅 Next period expected on 2024-03-29" in report
    assert "• Energy: 70/100 (good)" in report
    assert plan.nutrition_text in report
    assert plan.movement_text in report

def test_generate_daily_report_when_late(regular_config):
    """Test that a late period is reported instead of the next date."""
    report = generate_daily_report(build_daily_plan(regular_config, today=date(2024, 4, 5)))

    assert "⏳ Your period is 8 day(s) late" in report
    assert "Next period expected" not in report
