"""Custom exception classes for the glyphlog library."""


class GlyphlogError(Exception):
    """Base exception class for all glyphlog errors."""

    def __init__(self, message: str):
        """Initializes the base exception.

        Args:
            message: The error message.
        """
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class ConfigurationError(GlyphlogError):
    """Represents an invalid value handed to a logger setter or constructor.

    Raised for unknown severity names, out-of-range levels and template lists
    that do not hold between one and four strings. Logging calls themselves
    never raise it.
    """

    def __init__(self, message: str, *, value: object = None):
        super().__init__(message)
        self.value = value
