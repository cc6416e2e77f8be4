"""Base provider interface."""

from abc import ABC, abstractmethod


class TextGenerationProvider(ABC):
    """Abstract base class for generative model integrations."""

    #: Human-readable provider name used in logs
    name: str = "provider"

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """Send one prompt and return the model's text reply.

        Args:
            prompt: Full prompt text

        Returns:
            Raw text produced by the model

        Raises:
            ExtractionError: If the provider cannot produce a reply
        """
        pass
