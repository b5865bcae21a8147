from enum import Enum
from typing import Any

import httpx


BASE_URL = "https://generativelanguage.googleapis.com/v1beta/"
TIMEOUT = 60 * 2


class GeminiError(Exception):
    """The service answered, but not with something we can use."""


class Modality(Enum):
    TEXT = "TEXT"
    IMAGE = "IMAGE"


def gemini_client_factory(
    *,
    base_url: str = BASE_URL,
    timeout: float = TIMEOUT,
) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Content-Type": "application/json"},
        timeout=timeout,
    )


class GeminiClient:
    def __init__(
        self,
        *,
        token: str | None,
        base_url: str = BASE_URL,
        timeout: float = TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.token = token
        self.http_client = (
            gemini_client_factory(base_url=base_url, timeout=timeout)
            if http_client is None
            else http_client
        )

    @staticmethod
    def payload(
        prompt: str,
        *,
        modalities: list[Modality] | None = None,
    ) -> dict[str, Any]:
        data: dict[str, Any] = {"contents": [{"parts": [{"text": prompt}]}]}
        if modalities:
            data["generationConfig"] = {
                "responseModalities": [m.value for m in modalities]
            }
        return data

    async def generate_content(
        self,
        model: str,
        prompt: str,
        *,
        modalities: list[Modality] | None = None,
    ) -> list[dict[str, Any]]:
        """Parts of the first candidate, in the order the service sent them."""
        resp = await self.http_client.post(
            f"models/{model}:generateContent",
            headers={"x-goog-api-key": self.token or ""},
            json=self.payload(prompt, modalities=modalities),
        )
        resp.raise_for_status()
        try:
            data = resp.json()
        except ValueError as e:
            raise GeminiError(f"Response is not JSON. {resp.text[:200]}") from e

        if not isinstance(data, dict):
            raise GeminiError(f"Unexpected response. {data!r:.200}")
        if "error" in data:
            raise GeminiError(f"Problem generating content. {data['error']}")

        candidates = data.get("candidates") or []
        if not isinstance(candidates, list) or not candidates:
            raise GeminiError(f"No candidates returned. {data!r:.200}")
        candidate = candidates[0]
        if not isinstance(candidate, dict):
            raise GeminiError(f"Unexpected candidate. {candidate!r:.200}")
        content = candidate.get("content") or {}
        if not isinstance(content, dict):
            raise GeminiError(f"Unexpected content. {content!r:.200}")
        parts = content.get("parts") or []
        if not isinstance(parts, list):
            raise GeminiError(f"Unexpected parts. {parts!r:.200}")
        return [p for p in parts if isinstance(p, dict)]

    async def generate_text(self, model: str, prompt: str) -> str:
        parts = await self.generate_content(model, prompt)
        return "".join(p["text"] for p in parts if isinstance(p.get("text"), str))

    async def close(self) -> None:
        await self.http_client.aclose()
