"""Meal suggestion service backed by a language model."""

from dataclasses import dataclass
from typing import Protocol

from pydantic import ValidationError

from family_planner.domain.errors import SuggestionError
from family_planner.domain.suggestions import MealSuggestion, MealSuggestions

SYSTEM_PROMPT = (
    "You are a helpful cooking assistant. Generate realistic meal suggestions "
    "based on user preferences. Return valid JSON only."
)


class SuggestionClient(Protocol):
    """Interface for LLM meal suggestions."""

    async def suggest(
        self, *, model: str, system_prompt: str, prompt: str
    ) -> object:
        """Return the decoded JSON payload produced by the model."""


@dataclass
class SuggestionService:
    """Service that builds suggestion prompts and validates results."""

    client: SuggestionClient
    model: str

    async def suggest(
        self,
        cuisines: list[str] | None = None,
        dietary: list[str] | None = None,
        meal_type: str = "dinner",
    ) -> list[MealSuggestion]:
        """Ask the model for meal ideas matching the preferences."""
        raw = await self.client.suggest(
            model=self.model,
            system_prompt=SYSTEM_PROMPT,
            prompt=build_prompt(cuisines or [], dietary or [], meal_type),
        )
        if isinstance(raw, dict) and "meals" in raw:
            payload = raw
        elif isinstance(raw, list):
            payload = {"meals": raw}
        else:
            raise SuggestionError("Model response did not contain meals")
        try:
            return MealSuggestions.model_validate(payload).meals
        except ValidationError as exc:
            raise SuggestionError("Model returned malformed meals") from exc


def build_prompt(cuisines: list[str], dietary: list[str], meal_type: str) -> str:
    """Build the user prompt for meal suggestions."""
    return (
        f"Generate 5 {meal_type} meal suggestions with the following preferences:\n"
        f"- Cuisines: {', '.join(cuisines) or 'any'}\n"
        f"- Dietary restrictions: {', '.join(dietary) or 'none'}\n"
        "\n"
        "For each meal, provide:\n"
        "- name: string\n"
        "- description: string (brief)\n"
        "- cuisine: string\n"
        "- ingredients: array of strings\n"
        "- instructions: string (brief cooking instructions)\n"
        "- prepTimeMinutes: number\n"
        "- servings: number (default 4)\n"
        "\n"
        'Return a JSON object of the form {"meals": [...]}.'
    )
