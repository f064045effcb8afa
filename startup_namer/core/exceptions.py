"""
Custom application exceptions.
"""


class NamerError(Exception):
    """Base exception for startup namer errors."""
    pass


class ValidationError(NamerError):
    """Caller input is missing or invalid."""
    pass


class ConfigurationError(NamerError):
    """Required credentials are not configured."""
    pass


class GenerationError(NamerError):
    """Name generation failed or produced unusable output."""
    pass


class NoValidNamesError(GenerationError):
    """Generation completed but no usable names survived validation."""
    pass


class APIError(NamerError):
    """External API call failed."""
    pass


class GeminiAPIError(APIError):
    """Gemini API call failed."""
    pass


class UpstreamError(APIError):
    """Domain availability lookup failed."""
    pass
