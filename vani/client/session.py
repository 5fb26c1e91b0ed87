"""Client-side analysis session: staged files, one request in flight, result."""

from collections.abc import Sequence
from enum import Enum

from vani.analysis.interpreter import render_result
from vani.analysis.models import AnalysisResult
from vani.client.api_client import AnalyzeApiClient
from vani.client.exceptions import AnalysisInProgressError
from vani.intake.models import Diagnostic, IntakeResult, Severity, UploadedFile
from vani.intake.validator import accept_files, exceeds_limit, is_at_capacity
from vani.logging.logger import Log


class SessionState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


class AnalysisSession:
    """Holds the accepted set and drives one analysis invocation at a time.

    At most one of loading, result and error is present. ``last_diagnostics``
    carries the notifications produced by the most recent action.
    """

    def __init__(self, api_client: AnalyzeApiClient) -> None:
        self._api_client = api_client
        self._files: tuple[UploadedFile, ...] = ()
        self.state = SessionState.IDLE
        self.result: AnalysisResult | None = None
        self.error: str | None = None
        self.last_diagnostics: tuple[Diagnostic, ...] = ()

    @property
    def files(self) -> tuple[UploadedFile, ...]:
        return self._files

    @property
    def can_add_files(self) -> bool:
        return not is_at_capacity(self._files)

    @property
    def exceeds_limit(self) -> bool:
        return exceeds_limit(self._files)

    @property
    def is_loading(self) -> bool:
        return self.state is SessionState.LOADING

    def offer(self, offered: Sequence[UploadedFile]) -> IntakeResult:
        """Stage a newly selected batch of files."""
        outcome = accept_files(self._files, offered)
        self._files = outcome.accepted
        self.last_diagnostics = outcome.diagnostics
        for diagnostic in outcome.diagnostics:
            Log.warning(f"{diagnostic.title}: {diagnostic.description}")
        return outcome

    def remove(self, name: str) -> bool:
        """Unstage the first file called ``name``. Returns False if none matched."""
        for index, file in enumerate(self._files):
            if file.name == name:
                self._files = self._files[:index] + self._files[index + 1 :]
                return True
        return False

    def analyze(self) -> AnalysisResult | None:
        """Send the staged files for analysis.

        Returns the result, or None when nothing was staged or the request
        failed; ``error`` and ``last_diagnostics`` describe the failure.

        Raises:
            AnalysisInProgressError: if a request is already outstanding.
        """
        if self.is_loading:
            raise AnalysisInProgressError("An analysis is already in progress")
        if not self._files:
            self.last_diagnostics = (
                Diagnostic(
                    Severity.ERROR,
                    "No files selected",
                    "Please select at least one file to analyze",
                ),
            )
            return None

        self.state = SessionState.LOADING
        self.result = None
        self.error = None
        self.last_diagnostics = ()
        try:
            result = self._api_client.analyze(self._files)
        except Exception as exc:
            self.state = SessionState.ERROR
            self.error = str(exc) or "Analysis failed"
            self.last_diagnostics = (Diagnostic(Severity.ERROR, "Analysis failed", self.error),)
            Log.error(f"Analysis failed: {self.error}")
            return None

        self.state = SessionState.SUCCESS
        self.result = result
        Log.info("Analysis completed successfully")
        return result

    def copy_json(self) -> str | None:
        """Pretty JSON of the current result, as placed on the clipboard."""
        if self.result is None:
            return None
        return render_result(self.result)
