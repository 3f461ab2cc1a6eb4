"""
Service module for composing the plan for a single cycle day.

Typical usage:
    config = CycleConfiguration(last_period_start=date(2024, 3, 1))
    plan = build_daily_plan(config)
    print(generate_daily_report(plan))
"""
from typing import Optional
from datetime import date, timedelta

from aws_lambda_powertools import Logger

from src.models.cycle import CycleConfiguration
from src.models.daily_plan import DailyPlan
from src.services.constants import PHASE_INSIGHTS, PHASE_LABELS
from src.services.content import select_nutrition, select_movement, render_nutrition, render_movement
from src.services.cycle import get_derived_state, get_next_period_date
from src.services.estimate import suggest_for_day, get_mood_emoji, get_energy_level
from src.services.phase import get_phase_by_day, get_subphase

logger = Logger()

def build_daily_plan(
    config: CycleConfiguration,
    today: Optional[date] = None,
    day: Optional[int] = None
) -> DailyPlan:
    """
    Build the daily plan for today or for another day of the cycle.

    Args:
        config: Cycle settings
        today: Reference date, defaults to the current date
        day: Cycle day to plan for instead of today's (used for previews)

    Returns:
        DailyPlan with phase, estimate, insight, nutrition and movement

    Example:
        >>> plan = build_daily_plan(config, today=date(2024, 3, 15))
        >>> plan.cycle_day, plan.phase
        (15, <PhaseKey.LUTEAL: 'luteal'>)
    """
    state = get_derived_state(config, today)
    if day is None:
        day = state.current_day
    plan_date = state.today + timedelta(days=day - state.current_day)

    phase_range = get_phase_by_day(day, state.phase_ranges, config.cycle_length)
    info = get_subphase(day, config.cycle_length, config.period_length)
    estimate = suggest_for_day(day, state.phase_ranges, config.cycle_length)

    nutrition = select_nutrition(day, info.phase, info.subphase)
    movement = select_movement(day, info.phase, info.subphase, state.phase_ranges)

    next_period = None
    if config.last_period_start:
        next_period = get_next_period_date(config.last_period_start, config.cycle_length)

    logger.info("Built daily plan", extra={
        "plan_date": plan_date.isoformat(),
        "cycle_day": day,
        "phase": info.phase.value,
        "subphase": info.subphase.value if info.subphase else None,
        "is_cardio_day": movement.is_cardio_day
    })

    return DailyPlan(
        plan_date=plan_date,
        cycle_day=day,
        cycle_length=config.cycle_length,
        phase=info.phase,
        subphase=info.subphase,
        phase_range=phase_range,
        estimate=estimate,
        insight=PHASE_INSIGHTS[info.phase],
        nutrition=nutrition,
        nutrition_text=render_nutrition(nutrition),
        movement=movement,
        movement_text=render_movement(movement),
        next_period=next_period
    )

def generate_daily_report(plan: DailyPlan) -> str:
    """
    Generate a readable report for a daily plan.

    Args:
        plan: DailyPlan to format

    Returns:
        Formatted report string
    """
    phase_label = PHASE_LABELS[plan.phase]
    if plan.subphase:
        phase_label = f"{phase_label} ({plan.subphase.value})"

    report = [
        f"🌙 Daily Plan for {plan.plan_date.isoformat()}",
        f"Cycle day {plan.cycle_day} of {plan.cycle_length}: {phase_label}",
    ]

    if plan.is_overdue:
        report.append(f"⏳ Your period is {plan.cycle_day - plan.cycle_length} day(s) late")
    elif plan.next_period:
        report.append(f"📅 Next period expected on {plan.next_period.isoformat()}")

    report.extend([
        "",
        f"✨ {plan.insight.title}",
        plan.insight.description,
        *[f"• {recommendation}" for recommendation in plan.insight.recommendations],
        "",
        "📊 Today's Outlook:",
        f"• Energy: {plan.estimate.energy}/100 ({get_energy_level(plan.estimate.energy)})",
        f"• Mood: {plan.estimate.mood}/5 {get_mood_emoji(plan.estimate.mood)}",
        "",
        "🥗 Nutrition:",
        plan.nutrition_text,
        "",
        "💪 Movement:",
        plan.movement_text,
    ])

    return "\n".join(report)
