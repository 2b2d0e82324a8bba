from .base import SentimentProvider, SentimentProviderError
from .huggingface_provider import HuggingFaceProvider
from .factory import create_provider_from_settings

__all__ = [
    "SentimentProvider",
    "SentimentProviderError",
    "HuggingFaceProvider",
    "create_provider_from_settings",
]
