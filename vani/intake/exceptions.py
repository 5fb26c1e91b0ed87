class IntakeError(Exception):
    """Raised when an offered file cannot be staged for analysis."""

    def __init__(self, message: str, *, file_name: str) -> None:
        super().__init__(message)
        self.file_name = file_name


class FileTooLargeError(IntakeError):
    """Raised when a file exceeds the per-file size limit."""


class UnsupportedFormatError(IntakeError):
    """Raised when a file extension is not one of the accepted formats."""
