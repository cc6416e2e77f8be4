"""Google Gemini provider integration."""

import logging
from typing import Any, ClassVar

import httpx

from hrms_api.exceptions import ExtractionError
from hrms_api.providers.base import TextGenerationProvider

logger = logging.getLogger(__name__)

# Gemini API constants
GEMINI_CONNECT_TIMEOUT = 10.0
USER_AGENT = "HRMS-API/0.1"


class GeminiProvider(TextGenerationProvider):
    """Google Gemini ``generateContent`` integration.

    Sends a single-turn prompt and returns the text of the first candidate.
    """

    name = "gemini"

    # Shared HTTP client for connection reuse
    _http_client: ClassVar[httpx.AsyncClient | None] = None

    def __init__(
        self,
        api_key: str,
        model: str,
        base_url: str,
        timeout: float = 60.0,
    ) -> None:
        """Initialize Gemini provider.

        Args:
            api_key: Gemini API key
            model: Model name, e.g. ``gemini-2.5-flash``
            base_url: API base URL up to the version segment
            timeout: Read timeout for one generation call in seconds
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def _get_http_client(cls, timeout: float) -> httpx.AsyncClient:
        """Get or create shared HTTP client with connection pooling."""
        if cls._http_client is None or cls._http_client.is_closed:
            cls._http_client = httpx.AsyncClient(
                timeout=httpx.Timeout(timeout, connect=GEMINI_CONNECT_TIMEOUT),
                limits=httpx.Limits(max_connections=10, max_keepalive_connections=5),
                headers={
                    "User-Agent": USER_AGENT,
                    "Content-Type": "application/json",
                },
            )
        return cls._http_client

    @classmethod
    async def close_client(cls) -> None:
        """Close the shared HTTP client."""
        if cls._http_client and not cls._http_client.is_closed:
            await cls._http_client.aclose()
            cls._http_client = None

    def _get_headers(self) -> dict[str, str]:
        """Get API request headers."""
        return {"x-goog-api-key": self.api_key}

    @staticmethod
    def _extract_text(data: dict[str, Any]) -> str | None:
        """Pull the first candidate's text out of a generateContent response."""
        candidates = data.get("candidates")
        if not isinstance(candidates, list) or not candidates or not isinstance(candidates[0], dict):
            return None
        content = candidates[0].get("content")
        parts = content.get("parts") if isinstance(content, dict) else None
        if not isinstance(parts, list):
            return None
        texts = [
            part["text"] for part in parts if isinstance(part, dict) and isinstance(part.get("text"), str)
        ]
        return "".join(texts) if texts else None

    async def generate(self, prompt: str) -> str:
        """Generate a reply for ``prompt``.

        Raises:
            ExtractionError: On transport errors, non-200 replies or empty output
        """
        client = self._get_http_client(self.timeout)
        url = f"{self.base_url}/models/{self.model}:generateContent"
        payload = {"contents": [{"role": "user", "parts": [{"text": prompt}]}]}

        try:
            response = await client.post(
                url,
                headers=self._get_headers(),
                json=payload,
                timeout=httpx.Timeout(self.timeout, connect=GEMINI_CONNECT_TIMEOUT),
            )
        except httpx.TimeoutException as e:
            logger.warning("Gemini request timed out after %ss", self.timeout)
            raise ExtractionError("AI provider request timed out") from e
        except httpx.HTTPError as e:
            logger.error("Gemini request failed: %s", type(e).__name__)
            raise ExtractionError("AI provider request failed") from e

        if response.status_code != 200:
            logger.warning("Gemini generateContent returned %s", response.status_code)
            raise ExtractionError(f"AI provider returned status {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            raise ExtractionError("AI provider returned a non-JSON response") from e

        text = self._extract_text(data) if isinstance(data, dict) else None
        if not text:
            raise ExtractionError("AI provider returned no text")

        return text
