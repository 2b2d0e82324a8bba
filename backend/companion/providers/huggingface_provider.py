"""Hugging Face Inference API provider for emotion classification."""

from __future__ import annotations

import asyncio
import json
from typing import Any, List, Optional

import httpx

from backend.companion.config.settings import DEFAULT_HUGGINGFACE_API_URL
from backend.companion.schemas import EmotionScore

from .base import SentimentProvider, SentimentProviderError


class HuggingFaceProvider(SentimentProvider):
    """Calls a hosted text-classification model and returns its label scores."""

    name = "huggingface"

    def __init__(
        self,
        api_url: str = DEFAULT_HUGGINGFACE_API_URL,
        api_key: Optional[str] = None,
        timeout_seconds: float = 10.0,
        connect_timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_url = api_url
        self.api_key = api_key
        self.timeout_seconds = timeout_seconds
        self.connect_timeout_seconds = connect_timeout_seconds
        self._transport = transport

    async def classify(self, text: str) -> List[EmotionScore]:
        # httpx limits each phase separately; wait_for caps the whole call.
        try:
            data = await asyncio.wait_for(self._post(text), timeout=self.timeout_seconds)
        except asyncio.TimeoutError as exc:
            raise SentimentProviderError(
                f"Hugging Face request exceeded {self.timeout_seconds}s",
                provider=self.name,
                original_error=exc,
            ) from exc
        except httpx.TimeoutException as exc:
            raise SentimentProviderError(
                "Hugging Face request timeout",
                provider=self.name,
                original_error=exc,
            ) from exc
        except httpx.HTTPError as exc:
            raise SentimentProviderError(
                f"Hugging Face HTTP error: {exc}",
                provider=self.name,
                original_error=exc,
            ) from exc
        except json.JSONDecodeError as exc:
            raise SentimentProviderError(
                "Hugging Face returned invalid JSON",
                provider=self.name,
                original_error=exc,
            ) from exc

        return self._parse_scores(data)

    async def _post(self, text: str) -> Any:
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        timeout = httpx.Timeout(
            self.timeout_seconds,
            connect=self.connect_timeout_seconds,
        )
        async with httpx.AsyncClient(transport=self._transport, timeout=timeout) as client:
            resp = await client.post(self.api_url, headers=headers, json={"inputs": text})
            resp.raise_for_status()
            return resp.json()

    def _parse_scores(self, data: Any) -> List[EmotionScore]:
        # The inference API wraps results per input: [[{label, score}, ...]]
        rows = data
        if isinstance(rows, list) and rows and isinstance(rows[0], list):
            rows = rows[0]
        if not isinstance(rows, list) or not rows:
            raise SentimentProviderError("Hugging Face response has no scores", provider=self.name)

        try:
            return [EmotionScore(label=str(row["label"]).lower(), score=float(row["score"])) for row in rows]
        except (KeyError, TypeError, ValueError) as exc:
            raise SentimentProviderError(
                f"Hugging Face response missing expected fields: {exc}",
                provider=self.name,
                original_error=exc,
            ) from exc


__all__ = ["HuggingFaceProvider"]
