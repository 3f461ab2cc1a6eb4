"""
Daily content models: the static catalog schema and per-day selections.
"""
from typing import Dict, List, Tuple
from pydantic import BaseModel, Field, model_validator

class NutritionContent(BaseModel):
    """
    Nutrition texts for one content bucket.
    """
    nutrients: Dict[str, Tuple[str, ...]]  # nutrient -> foods that provide it
    benefits: Tuple[str, ...]
    reason_template: str
    nutrient_reasons: Dict[str, str] = Field(default_factory=dict)
    model_config = {"frozen": True}

    @model_validator(mode="after")
    def check_selectable(self) -> "NutritionContent":
        if len(self.nutrients) < 4:
            raise ValueError("a nutrition bucket needs at least 4 nutrients")
        for nutrient, foods in self.nutrients.items():
            if len(foods) < 2:
                raise ValueError(f"nutrient '{nutrient}' needs at least 2 foods")
        if not self.benefits:
            raise ValueError("a nutrition bucket needs at least one benefit")
        return self

class MovementContent(BaseModel):
    """
    Movement texts for one content bucket.
    """
    primary_exercise: Tuple[str, ...] = Field(..., min_length=1)
    short_workout_tip: str
    cardio_with_cardio: Tuple[str, ...] = ()
    cardio_no_cardio: Tuple[str, ...] = ()
    walk_benefits: Tuple[str, ...] = Field(..., min_length=1)
    model_config = {"frozen": True}

class ContentCatalog(BaseModel):
    """
    All nutrition and movement content, keyed by master key.
    """
    nutrition: Dict[str, NutritionContent]
    movement: Dict[str, MovementContent]
    model_config = {"frozen": True}

class NutritionSelection(BaseModel):
    """Nutrition picked for a single day."""
    day: int
    master_key: str
    nutrients: List[str] = Field(..., min_length=4, max_length=4)
    foods: List[str] = Field(..., min_length=6, max_length=6)
    benefit: str
    reason: str

class MovementSelection(BaseModel):
    """Movement suggestions picked for a single day."""
    day: int
    master_key: str
    is_cardio_day: bool
    lines: List[str] = Field(..., min_length=4, max_length=4)
