class AnalysisError(Exception):
    """Raised when a style analysis cannot be produced."""


class AnalysisConfigurationError(AnalysisError):
    """Raised when the AI provider is not configured (e.g. missing API key)."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""


class FileProcessingError(AnalysisError):
    """Raised when an uploaded file cannot be prepared for the AI provider."""

    def __init__(self, file_name: str) -> None:
        super().__init__(
            f'Failed to process file "{file_name}". '
            "The file may be corrupted or in an unsupported format."
        )
        self.file_name = file_name
