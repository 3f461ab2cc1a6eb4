"""
Constants and shared data for cycle-related services.
"""
from typing import Dict, Tuple
from src.models.phase import PhaseKey
from src.models.cycle import LUTEAL_LENGTH
from src.models.daily_plan import PhaseInsight

MIN_CYCLE_LENGTH = 21
MAX_CYCLE_LENGTH = 45
MIN_PERIOD_LENGTH = 2
MAX_PERIOD_LENGTH = 10

# Fertile window around the ovulation day: 5 days before, 1 day after
FERTILE_DAYS_BEFORE_OVULATION = 5
FERTILE_DAYS_AFTER_OVULATION = 1

# Subphase split tables: (percentages, minimum lengths)
MENSTRUAL_SPLIT: Tuple[Tuple[float, float, float], Tuple[int, int, int]] = ((0.40, 0.35, 0.25), (2, 1, 1))
LUTEAL_SPLIT: Tuple[Tuple[float, float, float], Tuple[int, int, int]] = ((0.35, 0.40, 0.25), (2, 2, 2))
MENSTRUAL_MIN_SPLIT_LENGTH = 3

# Follicular phases up to this length get no transition segment
SHORT_FOLLICULAR_LENGTH = 8
SHORT_FOLLICULAR_MID_SHARE = 0.70
FOLLICULAR_TRANSITION_SHARE = 0.15
FOLLICULAR_MID_SHARE = 0.55
FOLLICULAR_MIN_TRANSITION = 1
FOLLICULAR_MIN_MID = 3
FOLLICULAR_MIN_LATE = 2

# Energy (0-100) and mood (1-5) interpolation endpoints per phase
PHASE_ENERGY_MOOD: Dict[PhaseKey, Dict[str, Tuple[float, float]]] = {
    PhaseKey.MENSTRUAL: {"energy": (30, 45), "mood": (2.3, 3.0)},
    PhaseKey.FOLLICULAR: {"energy": (50, 85), "mood": (3.3, 4.5)},
    PhaseKey.LUTEAL: {"energy": (70, 35), "mood": (4.0, 2.6)},
}
OVULATION_PEAK_ENERGY = 90
OVULATION_ENERGY_SLOPE = 8
OVULATION_PEAK_MOOD = 4.8
OVULATION_MOOD_SLOPE = 0.3

# Seeded shuffle LCG parameters
LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF

# Cardio every Nth day of follicular / early luteal, counted from the phase start
CARDIO_DAY_INTERVAL = 3

NUTRIENTS_PER_DAY = 4
FOODS_PER_NUTRIENT = (2, 2, 1, 1)

# Content bucket keys
MASTER_MENSTRUAL = "menstrual"
MASTER_FOLLICULAR = "follicular"
MASTER_OVULATION = "ovulation"
MASTER_LUTEAL_EARLY = "luteal_early"
MASTER_LUTEAL_MID = "luteal_mid"
MASTER_LUTEAL_LATE = "luteal_late"

MASTER_KEYS = (
    MASTER_MENSTRUAL,
    MASTER_FOLLICULAR,
    MASTER_OVULATION,
    MASTER_LUTEAL_EARLY,
    MASTER_LUTEAL_MID,
    MASTER_LUTEAL_LATE,
)

NUTRITION_TEMPLATE = (
    "Today your body needs {nutrients} — {reason}.\n\n"
    "You'll find them in foods like {foods}.\n\n"
    "Today's choice will help you {benefit}."
)
WALK_TEMPLATE = "Try to spend at least 30 minutes outdoors today. A walk will help you {benefit}"

PHASE_LABELS = {
    PhaseKey.MENSTRUAL: "Menstruation",
    PhaseKey.FOLLICULAR: "Follicular",
    PhaseKey.OVULATION: "Ovulation",
    PhaseKey.LUTEAL: "Luteal",
}

PHASE_INSIGHTS = {
    PhaseKey.MENSTRUAL: PhaseInsight(
        title="Time to rest",
        description="Your body is regenerating and getting ready for a new cycle.",
        recommendations=[
            "Allow yourself more rest",
            "Gentle movement such as yoga",
            "Warm drinks and nourishing food",
            "Listen to your body"
        ],
        energy="Lower energy",
        mood="Introspective mood"
    ),
    PhaseKey.FOLLICULAR: PhaseInsight(
        title="Rising energy",
        description="Hormones are climbing and you feel better day by day.",
        recommendations=[
            "A great time to start new projects",
            "Cardio workouts",
            "Social activities",
            "Planning and goal setting"
        ],
        energy="Rising energy",
        mood="Optimistic mood"
    ),
    PhaseKey.OVULATION: PhaseInsight(
        title="Peak of the cycle",
        description="Highest energy and self-confidence.",
        recommendations=[
            "Challenging workouts",
            "Important meetings",
            "Creative projects",
            "Connecting with others"
        ],
        energy="Maximum energy",
        mood="Confident mood"
    ),
    PhaseKey.LUTEAL: PhaseInsight(
        title="Winding down",
        description="Energy gradually drops as your body prepares for menstruation.",
        recommendations=[
            "Finish open tasks",
            "Moderate exercise",
            "Wholesome meals",
            "Prepare for your period"
        ],
        energy="Declining energy",
        mood="Calmer mood"
    ),
}

# (minimum mood, emoji), checked top to bottom
MOOD_EMOJIS = (
    (4.5, "🤩"),
    (3.5, "🙂"),
    (2.5, "😕"),
    (0.0, "😞"),
)

# (minimum energy, label), checked top to bottom
ENERGY_LEVELS = (
    (80, "high"),
    (60, "good"),
    (40, "moderate"),
    (0, "low"),
)
