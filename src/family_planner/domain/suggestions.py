"""Models for AI meal suggestions."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MealSuggestion(BaseModel):
    """A single meal idea proposed by the language model."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: str | None = None
    cuisine: str | None = None
    ingredients: list[str] = Field(default_factory=list)
    instructions: str | None = None
    prep_time_minutes: int | None = Field(default=None, ge=0)
    servings: int = Field(default=4, ge=1)


class MealSuggestions(BaseModel):
    """Structured output for meal suggestions."""

    meals: list[MealSuggestion]
