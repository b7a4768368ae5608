from typing import Optional


class ServiceError(Exception):
    """Server-side failure rendered as ``{"error": message}``."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MissingConfigurationError(ServiceError):
    """A required setting (the provider credential) is absent."""


class ProviderError(ServiceError):
    """The LLM provider answered with a non-success status."""

    def __init__(self, message: str, upstream_status: Optional[int] = None) -> None:
        super().__init__(message)
        self.upstream_status = upstream_status


class InvalidAIResponseError(ServiceError):
    """The model reply did not contain a parseable JSON object."""
