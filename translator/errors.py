from __future__ import annotations


class TranslationError(Exception):
    """Base class for machine translation failures."""

    def __init__(self, message: str, original_error: Exception | None = None) -> None:
        super().__init__(message)
        self.original_error = original_error


class InvalidInput(TranslationError, ValueError):
    """The caller supplied something that cannot be translated, e.g. empty text."""


class TranslationFailed(TranslationError):
    """A well-formed request could not be completed by the provider."""


class RequestBuildFailed(TranslationFailed):
    pass


class TransportFailed(TranslationFailed):
    pass


class ProviderError(TranslationFailed):
    def __init__(self, message: str, *, status: int, body: str = "") -> None:
        super().__init__(message)
        self.status = status
        self.body = body


class ResponseParseFailed(TranslationFailed):
    pass
