"""OpenAI Chat Completions client for meal suggestions."""

import json
from dataclasses import dataclass

import httpx
from openai import AsyncOpenAI

from family_planner.services.suggestions import SuggestionClient


@dataclass
class OpenAISuggestionClient(SuggestionClient):
    """Suggestion client backed by OpenAI JSON mode."""

    client: AsyncOpenAI

    @classmethod
    def create(
        cls, api_key: str, timeout_seconds: float = 30.0
    ) -> "OpenAISuggestionClient":
        """Create a suggestion client with a managed httpx session."""
        return cls(
            client=AsyncOpenAI(
                api_key=api_key,
                http_client=httpx.AsyncClient(timeout=timeout_seconds),
            )
        )

    async def suggest(self, *, model: str, system_prompt: str, prompt: str) -> object:
        """Call Chat Completions and decode the JSON object it returns."""
        response = await self.client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": prompt},
            ],
            response_format={"type": "json_object"},
        )
        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(content)

    async def close(self) -> None:
        """Close the underlying HTTP client session."""
        await self.client.close()
