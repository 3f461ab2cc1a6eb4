"""
Service module for selecting the daily nutrition and movement content.

Every selection is seeded by the cycle day, so the same day always yields
the same text. The content tables are loaded once from a JSON data file.
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Optional, Union

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from src.config import DAILY_CONTENT_PATH
from src.models.content import ContentCatalog, NutritionSelection, MovementSelection
from src.models.phase import PhaseKey, Subphase, PhaseRange
from src.services.constants import (
    CARDIO_DAY_INTERVAL,
    NUTRIENTS_PER_DAY,
    FOODS_PER_NUTRIENT,
    MASTER_MENSTRUAL,
    MASTER_FOLLICULAR,
    MASTER_OVULATION,
    MASTER_LUTEAL_EARLY,
    MASTER_LUTEAL_MID,
    MASTER_LUTEAL_LATE,
    MASTER_KEYS,
    NUTRITION_TEMPLATE,
    WALK_TEMPLATE,
)
from src.services.exceptions import ContentCatalogError
from src.services.shuffle import seeded_shuffle

logger = Logger()

@lru_cache(maxsize=None)
def load_content_catalog(path: Optional[Union[str, Path]] = None) -> ContentCatalog:
    """
    Load and validate the daily content tables.

    Args:
        path: Data file to read, defaults to DAILY_CONTENT_PATH

    Returns:
        Validated ContentCatalog, cached per path

    Raises:
        ContentCatalogError: If the file is missing, malformed or lacks a bucket
    """
    content_path = Path(path) if path else DAILY_CONTENT_PATH

    try:
        catalog = ContentCatalog.model_validate_json(content_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ContentCatalogError(f"Cannot read content file {content_path}: {e}") from e
    except ValidationError as e:
        raise ContentCatalogError(f"Invalid content file {content_path}: {e}") from e

    for section, buckets in (("nutrition", catalog.nutrition), ("movement", catalog.movement)):
        missing = [key for key in MASTER_KEYS if key not in buckets]
        if missing:
            raise ContentCatalogError(f"Content file {content_path} lacks {section} buckets: {missing}")

    logger.debug("Loaded content catalog", extra={"path": str(content_path)})
    return catalog

def get_master_key(phase: Union[PhaseKey, str], subphase: Optional[Union[Subphase, str]]) -> str:
    """
    Map a phase and subphase to a content bucket key.

    Luteal days are split by subphase (mid when unknown). Any phase that is
    not recognised falls back to the menstrual bucket.
    """
    if phase == PhaseKey.OVULATION:
        return MASTER_OVULATION
    if phase == PhaseKey.MENSTRUAL:
        return MASTER_MENSTRUAL
    if phase == PhaseKey.FOLLICULAR:
        return MASTER_FOLLICULAR
    if phase == PhaseKey.LUTEAL:
        if subphase == Subphase.EARLY:
            return MASTER_LUTEAL_EARLY
        if subphase == Subphase.LATE:
            return MASTER_LUTEAL_LATE
        return MASTER_LUTEAL_MID

    logger.warning("Unknown phase, using menstrual content", extra={
        "phase": str(phase),
        "subphase": str(subphase)
    })
    return MASTER_MENSTRUAL

def select_nutrition(
    day: int,
    phase: Union[PhaseKey, str],
    subphase: Optional[Union[Subphase, str]]
) -> NutritionSelection:
    """
    Pick today's nutrients, foods and benefit.

    Args:
        day: Day in the cycle, used as the seed
        phase: Top-level phase
        subphase: Subphase within the phase, if any

    Returns:
        NutritionSelection with 4 nutrients and 6 foods
    """
    master_key = get_master_key(phase, subphase)
    content = load_content_catalog().nutrition[master_key]

    nutrients = seeded_shuffle(list(content.nutrients.keys()), day)[:NUTRIENTS_PER_DAY]

    foods: List[str] = []
    for i, nutrient in enumerate(nutrients):
        shuffled_foods = seeded_shuffle(content.nutrients[nutrient], day * (i + 2))
        foods.extend(shuffled_foods[:FOODS_PER_NUTRIENT[i]])

    benefit = seeded_shuffle(content.benefits, day * 3)[0]

    first_reason = content.nutrient_reasons.get(nutrients[0])
    second_reason = content.nutrient_reasons.get(nutrients[1])
    if first_reason and second_reason:
        reason = f"{nutrients[0]} {first_reason} and {nutrients[1]} {second_reason}"
    else:
        reason = content.reason_template

    return NutritionSelection(
        day=day,
        master_key=master_key,
        nutrients=nutrients,
        foods=foods,
        benefit=benefit,
        reason=reason
    )

def generate_nutrition(
    day: int,
    phase: Union[PhaseKey, str],
    subphase: Optional[Union[Subphase, str]]
) -> str:
    """Render today's nutrition selection as three paragraphs."""
    return render_nutrition(select_nutrition(day, phase, subphase))

def render_nutrition(selection: NutritionSelection) -> str:
    return NUTRITION_TEMPLATE.format(
        nutrients=", ".join(selection.nutrients),
        reason=selection.reason,
        foods=", ".join(selection.foods),
        benefit=selection.benefit
    )

def is_cardio_day(
    day: int,
    phase: Union[PhaseKey, str],
    subphase: Optional[Union[Subphase, str]],
    phase_ranges: List[PhaseRange]
) -> bool:
    """
    Decide whether cardio is suggested on a day.

    Never during menstruation or the mid and late luteal subphases, always
    at ovulation. Otherwise every third day counted from the first day of
    the phase (days 1, 4, 7, ... of the phase).
    """
    if phase == PhaseKey.MENSTRUAL:
        return False
    if phase == PhaseKey.LUTEAL and subphase in (Subphase.MID, Subphase.LATE):
        return False
    if phase == PhaseKey.OVULATION:
        return True

    for phase_range in phase_ranges:
        if phase_range.key == phase:
            return (day - phase_range.start) % CARDIO_DAY_INTERVAL == 0
    return False

def select_movement(
    day: int,
    phase: Union[PhaseKey, str],
    subphase: Optional[Union[Subphase, str]],
    phase_ranges: List[PhaseRange]
) -> MovementSelection:
    """
    Pick today's four movement lines.

    Args:
        day: Day in the cycle, used as the seed
        phase: Top-level phase
        subphase: Subphase within the phase, if any
        phase_ranges: Top-level phase ranges for the cardio cadence

    Returns:
        MovementSelection with lines for exercise, the short workout tip,
        cardio and a walk
    """
    master_key = get_master_key(phase, subphase)
    content = load_content_catalog().movement[master_key]
    cardio = is_cardio_day(day, phase, subphase, phase_ranges)

    primary = seeded_shuffle(content.primary_exercise, day)[0]
    walk_benefit = seeded_shuffle(content.walk_benefits, day * 3)[0]

    if cardio and content.cardio_with_cardio:
        cardio_text = seeded_shuffle(content.cardio_with_cardio, day * 2)[0]
    elif content.cardio_no_cardio:
        cardio_text = seeded_shuffle(content.cardio_no_cardio, day * 2)[0]
    else:
        cardio_text = ""

    return MovementSelection(
        day=day,
        master_key=master_key,
        is_cardio_day=cardio,
        lines=[
            primary,
            content.short_workout_tip,
            cardio_text,
            WALK_TEMPLATE.format(benefit=walk_benefit),
        ]
    )

def generate_movement(
    day: int,
    phase: Union[PhaseKey, str],
    subphase: Optional[Union[Subphase, str]],
    phase_ranges: List[PhaseRange]
) -> str:
    """Render today's movement selection as bullet lines."""
    return render_movement(select_movement(day, phase, subphase, phase_ranges))

def render_movement(selection: MovementSelection) -> str:
    return "\n".join(f"- {line}" for line in selection.lines)
