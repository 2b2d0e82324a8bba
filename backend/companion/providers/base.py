"""Sentiment provider abstraction so the hosted model can be swapped or disabled."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Optional

from backend.companion.schemas import EmotionScore


class SentimentProvider(ABC):
    """Abstract base class for hosted emotion classifiers."""

    name: str = "unknown"

    @abstractmethod
    async def classify(self, text: str) -> List[EmotionScore]:
        """
        Classify text into emotion label/score pairs.

        Args:
            text: Raw user text

        Returns:
            Every label the model scored, in the order the model returned them

        Raises:
            SentimentProviderError: On transport, timeout or payload errors
        """
        pass


class SentimentProviderError(Exception):
    """Base exception for sentiment provider errors."""

    def __init__(self, message: str, provider: str, original_error: Optional[Exception] = None):
        super().__init__(message)
        self.provider = provider
        self.original_error = original_error


__all__ = ["SentimentProvider", "SentimentProviderError"]
