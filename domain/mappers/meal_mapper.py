"""
Meal domain mappers.
Handles transformation between raw TheMealDB items and meal DTOs.
"""

from dataclasses import dataclass
from typing import Any, Iterable, List, Mapping, Optional, Union

from domain.schemas.meal_schemas import MealDetail, MealIngredient, MealSummary

# TheMealDB spreads ingredients over numbered columns strIngredient1..20
MAX_INGREDIENTS = 20


@dataclass(frozen=True)
class Valid:
    meal: MealSummary


@dataclass(frozen=True)
class Invalid:
    reason: str


MealValidation = Union[Valid, Invalid]


def _non_empty_str(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _optional_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


class MealMapper:
    """Mapper for meal-related transformations."""

    SHAPE_FIELDS = ("idMeal", "strMeal", "strMealThumb")

    @staticmethod
    def validate(raw: Any) -> MealValidation:
        """
        Check that a raw remote item is a well-shaped meal.

        A well-shaped item is a mapping whose idMeal, strMeal and strMealThumb
        are non-empty strings.

        Returns:
            Valid wrapping the MealSummary, or Invalid with the reason
        """
        if not isinstance(raw, Mapping):
            return Invalid(f"expected a mapping, got {type(raw).__name__}")

        for key in MealMapper.SHAPE_FIELDS:
            if not _non_empty_str(raw.get(key)):
                return Invalid(f"{key} must be a non-empty string")

        return Valid(
            MealSummary(
                id=raw["idMeal"],
                name=raw["strMeal"],
                thumbnail_url=raw["strMealThumb"],
            )
        )

    @staticmethod
    def well_shaped(items: Iterable[Any]) -> List[MealSummary]:
        """Validate a result set, keeping the valid meals in their original order."""
        meals: List[MealSummary] = []
        for item in items:
            result = MealMapper.validate(item)
            if isinstance(result, Valid):
                meals.append(result.meal)
        return meals

    @staticmethod
    def to_detail(raw: Any) -> MealDetail:
        """
        Convert a full TheMealDB record into a MealDetail.

        No shape check is applied; absent or blank fields are left as None.
        """
        if not isinstance(raw, Mapping):
            raw = {}

        ingredients: List[MealIngredient] = []
        for i in range(1, MAX_INGREDIENTS + 1):
            name = _optional_str(raw.get(f"strIngredient{i}"))
            if name is None:
                continue
            measure = _optional_str(raw.get(f"strMeasure{i}")) or ""
            ingredients.append(MealIngredient(name=name, measure=measure))

        tags_raw = _optional_str(raw.get("strTags"))
        tags = [t.strip() for t in tags_raw.split(",") if t.strip()] if tags_raw else []

        return MealDetail(
            id=_optional_str(raw.get("idMeal")),
            name=_optional_str(raw.get("strMeal")),
            thumbnail_url=_optional_str(raw.get("strMealThumb")),
            category=_optional_str(raw.get("strCategory")),
            area=_optional_str(raw.get("strArea")),
            instructions=_optional_str(raw.get("strInstructions")),
            tags=tags,
            youtube_url=_optional_str(raw.get("strYoutube")),
            source_url=_optional_str(raw.get("strSource")),
            ingredients=ingredients,
        )
