class ClientError(Exception):
    """Base exception for the analysis client."""


class AnalysisRequestError(ClientError):
    """Raised when the analysis endpoint cannot produce a result."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class AnalysisInProgressError(ClientError):
    """Raised when an analysis is started while another one is outstanding."""
