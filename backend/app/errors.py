from __future__ import annotations


class TimetableError(Exception):
    """Base for failures that end a request with a JSON ``{"error": ...}`` body."""

    status_code = 500
    default_message = "Unknown error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MethodNotAllowed(TimetableError):
    status_code = 405
    default_message = "Method not allowed"


class ConfigurationError(TimetableError):
    status_code = 500
    default_message = "Missing API_KEY environment variable."


class ValidationError(TimetableError):
    status_code = 400
    default_message = "Invalid request."


class UpstreamError(TimetableError):
    status_code = 502
    default_message = "Upstream request failed"


class ExtractionError(TimetableError):
    status_code = 502
    default_message = "AI response was not valid JSON in the expected format."


class UnknownError(TimetableError):
    status_code = 500
