"""Error hierarchy for random-show-themes.

Every error is fatal: the CLI reports it on stderr and exits non-zero.
"""


class RandomShowThemesError(Exception):
    """Base class for all errors raised by the tool."""

    def __init__(self, message: str, source: str | None = None):
        """Initialize the error.

        Args:
            message: Human-readable error description
            source: Optional input the error relates to (file path or label)
        """
        self.message = message
        self.source = source
        super().__init__(message)

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class UsageError(RandomShowThemesError):
    """Bad, missing, or conflicting command line options."""


class ParseError(RandomShowThemesError):
    """Input is unreadable, is not valid JSON, or has the wrong top-level shape."""


class SchemaError(RandomShowThemesError):
    """Input is well-formed JSON but a show record does not fit the schema."""


class OutputError(RandomShowThemesError):
    """Writing the rendered output failed."""


class ShortfallError(RandomShowThemesError):
    """Fewer themes could be picked than requested while hard-fail is on."""
