"""Custom exception hierarchy for the application."""


class WikiParserError(Exception):
    """Base exception for all application errors."""

    def __init__(self, message: str, is_retryable: bool = False) -> None:
        """Initialize exception.

        Args:
            message: Error message
            is_retryable: Whether the operation can be retried
        """
        super().__init__(message)
        self.message = message
        self.is_retryable = is_retryable


class ConfigurationError(WikiParserError):
    """Configuration or environment setup error."""

    pass


class MarkupEngineError(WikiParserError):
    """The markup engine could not parse a page or fragment."""

    pass


class IngestionError(WikiParserError):
    """Dump reading error."""

    pass
