"""
Error types raised by the search pipelines

Every failure of a pipeline run surfaces as one of these; the HTTP layer maps
them to status codes in flyguide.main.
"""

from typing import Optional


class FlyGuideError(Exception):
    """Base class for all pipeline errors"""
    pass


class MissingCredentialError(FlyGuideError):
    """No Gemini API key is configured"""

    def __init__(self, message: str = "GOOGLE_GEMINI_API_KEY is not configured"):
        super().__init__(message)


class RateLimitedError(FlyGuideError):
    """Provider reported quota exhaustion"""

    def __init__(self, message: str = "Daily search limit reached, please try again tomorrow"):
        super().__init__(message)


class ProviderError(FlyGuideError):
    """Any other provider or transport failure"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedPayloadError(ValueError):
    """Structured block could not be parsed into the expected shape"""
    pass


class ResponseFormatError(FlyGuideError):
    """
    Provider answer could not be understood

    Raised when no fenced block was found or when the block was malformed.
    The raw provider text is kept for diagnostics.
    """

    def __init__(self, raw_text: str, reason: str):
        super().__init__(f"Could not understand search results: {reason}")
        self.raw_text = raw_text
        self.reason = reason
