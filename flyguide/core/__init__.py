"""
Core package - Configuration and cross-cutting concerns
"""

from .config import Settings, get_settings, reload_settings
from .exceptions import (
    FlyGuideError,
    MissingCredentialError,
    RateLimitedError,
    ProviderError,
    MalformedPayloadError,
    ResponseFormatError
)

__all__ = [
    "Settings",
    "get_settings",
    "reload_settings",
    "FlyGuideError",
    "MissingCredentialError",
    "RateLimitedError",
    "ProviderError",
    "MalformedPayloadError",
    "ResponseFormatError"
]
