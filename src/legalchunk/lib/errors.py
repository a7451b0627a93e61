"""Custom exception hierarchy for legalchunk configuration and document I/O.

The chunking pipeline itself never raises: every input string is valid.
These exceptions cover the layers around it (configuration loading and
reading extracted documents from disk).
"""


class LegalChunkError(Exception):
    """Base exception for all legalchunk errors.

    All legalchunk-specific exceptions inherit from this class, enabling
    centralized exception handling in the CLI.
    """

    pass


class ConfigError(LegalChunkError):
    """Exception raised for configuration errors.

    Raised when a config file cannot be parsed or a configured value is
    rejected by the ChunkerConfig model.

    Attributes:
        field: The configuration field that caused the error
        message: Human-readable error message describing the issue
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize ConfigError with field and message.

        Args:
            field: Configuration field name where error occurred
            message: Descriptive error message
        """
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class ValidationError(LegalChunkError):
    """Exception raised when a value fails validation.

    Attributes:
        field: The field that failed validation
        message: Description of the validation failure
        expected: Human description of expected value/type
        actual: The actual value that failed validation
    """

    def __init__(
        self,
        field: str,
        message: str,
        expected: str,
        actual: str,
    ) -> None:
        """Initialize ValidationError with detailed information.

        Args:
            field: Field that failed validation
            message: Description of what went wrong
            expected: Human-readable description of expected value
            actual: The actual value that failed
        """
        self.field = field
        self.message = message
        self.expected = expected
        self.actual = actual
        full_message = (
            f"Validation error in '{field}': {message}\n"
            f"  Expected: {expected}\n"
            f"  Got: {actual}"
        )
        super().__init__(full_message)


class FileNotFoundError(LegalChunkError):
    """Exception raised when a document or config file is not found.

    Attributes:
        path: Path to the file that was not found
        message: Human-readable error message
    """

    def __init__(self, path: str, message: str) -> None:
        """Initialize FileNotFoundError with path and message.

        Args:
            path: Path to the file that was not found
            message: Descriptive error message, optionally with suggestions
        """
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class DocumentReadError(LegalChunkError):
    """Exception raised when an extracted document cannot be read as text."""

    def __init__(self, path: str, message: str) -> None:
        """Create a read error with the offending path."""
        self.path = path
        self.message = message
        super().__init__(f"Cannot read document '{path}': {message}")
