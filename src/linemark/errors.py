"""Exception classes for linemark.

Provides standardized exceptions for error handling throughout linemark.
Only structural impossibilities raise; every other irregularity in the
input degrades to default classification.
"""

from __future__ import annotations


class LinemarkError(Exception):
    """Base exception for all linemark errors.

    Subclass this for specific error categories.
    """

    pass


class ProcessError(LinemarkError):
    """Error while processing a document.

    Raised when the input cannot be classified at all.
    """

    def __init__(
        self,
        message: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        """Initialize process error with optional location.

        Args:
            message: Error description
            lineno: Line number where the error occurred (1-indexed)
            source_file: Path to source file (optional)
        """
        self.message = message
        self.lineno = lineno
        self.source_file = source_file

        location = ""
        if source_file:
            location = f"{source_file}:"
        if lineno is not None:
            location += f"{lineno}:"
        if location:
            location = location.rstrip(":") + " "

        super().__init__(f"{location}{message}")


class UnterminatedFrontMatterError(ProcessError):
    """Front matter was opened but its close tag never appeared.

    The extractor refuses to consume past the end of the input, so the
    whole document is rejected instead of silently truncated.
    """

    def __init__(
        self,
        open_tag: str,
        close_tag: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.open_tag = open_tag
        self.close_tag = close_tag
        super().__init__(
            f"Front matter opened with {open_tag!r} is missing closing {close_tag!r}",
            lineno=lineno,
            source_file=source_file,
        )


class UnclosedRegionError(ProcessError):
    """An until-close region was still open at end of input.

    Only raised by processors built with ``strict=True``; lenient
    processors drop the remaining lines and log a warning instead.
    """

    def __init__(
        self,
        token: str,
        lineno: int | None = None,
        source_file: str | None = None,
    ) -> None:
        self.token = token
        super().__init__(
            f"Region opened with {token!r} was never closed",
            lineno=lineno,
            source_file=source_file,
        )


class RuleConfigError(LinemarkError):
    """Error in a rule table or processor configuration.

    Raised when configuration data names an unknown style, removal policy
    or scope, or carries an invalid pattern.
    """

    def __init__(self, field: str, message: str) -> None:
        """Initialize rule configuration error.

        Args:
            field: Name of the offending configuration field
            message: Description of the problem
        """
        self.field = field
        super().__init__(f"Invalid '{field}': {message}")
