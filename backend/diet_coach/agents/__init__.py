from .providers import (
    CoachProvider,
    GroqProvider,
    OllamaProvider,
    LocalFallbackProvider,
    ProviderError,
)

__all__ = [
    "CoachProvider",
    "GroqProvider",
    "OllamaProvider",
    "LocalFallbackProvider",
    "ProviderError",
]
