"""
Gemini Search Provider - Google AI Gemini with Google Search grounding
Sends one compiled instruction per call and returns the full answer text
"""

import logging
from typing import Any, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai.types import GenerateContentConfig, GoogleSearch, Tool

from flyguide.core.config import Settings
from flyguide.core.exceptions import MissingCredentialError, ProviderError, RateLimitedError

logger = logging.getLogger(__name__)


def extract_response_text(response: Any) -> str:
    """Extract text robustly from a Gemini response"""
    response_text = getattr(response, "text", None)
    if response_text:
        return response_text

    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return ""

    parts = getattr(getattr(candidates[0], "content", None), "parts", None) or []
    texts = [part.text for part in parts if hasattr(part, "text") and part.text]
    return "".join(texts)


class GeminiSearchProvider:
    """
    Search-grounded text generation with Gemini

    Features:
    - One blocking generate_content call per instruction, no retries
    - Google Search tool enabled so answers reflect live fares and places
    - Provider failures translated to RateLimitedError / ProviderError
    """

    def __init__(
        self,
        api_key: Optional[str],
        model_name: str = "gemini-2.5-flash",
        temperature: float = 0.7,
        max_output_tokens: int = 8192,
        client: Optional[Any] = None
    ):
        """
        Initialize the provider

        Args:
            api_key: Google Gemini API key
            model_name: Gemini model to call
            temperature: Sampling temperature
            max_output_tokens: Maximum tokens to generate
            client: Pre-built genai client (tests pass a substitute)

        Raises:
            MissingCredentialError: If no API key is given
        """
        if not api_key:
            raise MissingCredentialError()

        self.model_name = model_name
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.client = client or genai.Client(api_key=api_key)
        self._search_tool = Tool(google_search=GoogleSearch())

    @classmethod
    def from_settings(cls, settings: Settings) -> "GeminiSearchProvider":
        """Build a provider from application settings"""
        return cls(
            api_key=settings.google_gemini_api_key,
            model_name=settings.default_model_name,
            temperature=settings.default_temperature,
            max_output_tokens=settings.max_output_tokens
        )

    def invoke(self, instruction: str) -> str:
        """
        Send one instruction and return the provider's full answer text

        Raises:
            RateLimitedError: If the provider reports quota exhaustion
            ProviderError: For any other provider or transport failure
        """
        config = GenerateContentConfig(
            temperature=self.temperature,
            max_output_tokens=self.max_output_tokens,
            tools=[self._search_tool]
        )

        logger.info(f"Calling {self.model_name} with Google Search grounding ({len(instruction)} chars)")
        try:
            response = self.client.models.generate_content(
                model=self.model_name,
                contents=instruction,
                config=config
            )
        except genai_errors.APIError as e:
            if e.code == 429 or e.status == "RESOURCE_EXHAUSTED":
                logger.error(f"Gemini quota exhausted: {e.message}")
                raise RateLimitedError() from e
            logger.error(f"Gemini API error {e.code}: {e.message}")
            raise ProviderError(e.message or str(e), status_code=e.code) from e
        except Exception as e:
            logger.error(f"Gemini call failed: {str(e)}")
            raise ProviderError(str(e)) from e

        text = extract_response_text(response)
        logger.info(f"Received {len(text)} chars from {self.model_name}")
        return text

    def close(self) -> None:
        """Release the underlying HTTP connections"""
        self.client.close()
