from typing import Optional


class GlossaryLoadError(RuntimeError):
    """The glossary dataset is missing, malformed or fails validation."""


class UpstreamError(RuntimeError):
    """A third-party provider (Gemini, YouTube, Google Search) failed."""

    def __init__(self, provider: str, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.provider = provider
        self.status_code = status_code
