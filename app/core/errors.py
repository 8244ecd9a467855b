"""
Application errors for clean API error handling.

Services raise these; the API layer maps them to a JSON body {"error": message}
and an HTTP status. Anything not listed here surfaces as 500 with its own text.
"""


class ConfigMissingError(Exception):
    """Raised when the key-value store connection string is not configured."""

    def __init__(self, message: str = "Config missing.") -> None:
        self.message = message
        super().__init__(message)


class StructureNotFoundError(Exception):
    """Raised for expected not-found conditions (404). Message is user-facing."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UpstreamError(Exception):
    """Raised when the character blob cannot be fetched or is unusable."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EdgeConfigError(Exception):
    """Raised when Edge Config is misconfigured or a read fails."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
