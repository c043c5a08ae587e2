"""Pydantic schemas for meals served to the client."""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Serialized as camelCase JSON, populated by field name."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MealSummary(_CamelModel):
    """A meal as listed by search and filter results.

    Two summaries describe the same meal iff their ids are equal.
    """

    id: str = Field(..., description="TheMealDB identifier (idMeal)")
    name: str = Field(..., description="Display name (strMeal)")
    thumbnail_url: str = Field(..., description="Thumbnail image URL (strMealThumb)")


class MealIngredient(_CamelModel):
    """One ingredient line of a full meal record."""

    name: str
    measure: str = ""


class MealDetail(_CamelModel):
    """Normalized full meal record, as returned by a lookup by id.

    Built leniently: fields missing from the remote record stay None.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    thumbnail_url: Optional[str] = None
    category: Optional[str] = None
    area: Optional[str] = None
    instructions: Optional[str] = None
    tags: List[str] = []
    youtube_url: Optional[str] = None
    source_url: Optional[str] = None
    ingredients: List[MealIngredient] = []


class SearchCriteria(BaseModel):
    """Independent search filters; each non-empty one costs one remote call."""

    query: Optional[str] = Field(default=None, description="Free-text meal name search")
    category: Optional[str] = Field(default=None, description="Meal category, e.g. Dessert")
    area: Optional[str] = Field(default=None, description="Cuisine area, e.g. Italian")
    ingredient: Optional[str] = Field(default=None, description="Main ingredient, e.g. chicken")

    def requested(self) -> List[Tuple[str, str]]:
        """(filter name, value) pairs for every non-empty filter, in field order."""
        pairs = [
            ("query", self.query),
            ("category", self.category),
            ("area", self.area),
            ("ingredient", self.ingredient),
        ]
        return [(name, value) for name, value in pairs if value]
