"""Text generation provider integrations package."""

from hrms_api.providers.base import TextGenerationProvider
from hrms_api.providers.gemini import GeminiProvider

__all__ = [
    "GeminiProvider",
    "TextGenerationProvider",
]
