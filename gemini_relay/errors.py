# Error taxonomy for the relay.
# InvalidInputError -> HTTP 400, UpstreamError -> HTTP 500 (see app.py handlers).
# Extraction degradation is not an error: extract_text falls back silently.


class RelayError(Exception):
    """Base class for errors raised while serving a request."""


class InvalidInputError(RelayError):
    """Missing or malformed request input; reported under the offending field."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def to_payload(self) -> dict:
        return {self.field: self.message}


class UpstreamError(RelayError):
    """Failure while talking to the generation API or reading an upload."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_payload(self) -> dict:
        return {"error": self.message}
