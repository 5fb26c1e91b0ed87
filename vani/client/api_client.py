from collections.abc import Sequence

import httpx

from vani.analysis.models import DEFAULT_MIME_TYPE, AnalysisResult
from vani.client.exceptions import AnalysisRequestError
from vani.intake.models import UploadedFile


class AnalyzeApiClient:
    """HTTP client for the analysis endpoint."""

    ANALYZE_PATH = "/api/analyze"

    def __init__(
        self,
        *,
        base_url: str,
        timeout_seconds: float,
        http_client: httpx.Client | None = None,
    ) -> None:
        self._http = http_client or httpx.Client(base_url=base_url, timeout=timeout_seconds)

    def analyze(self, files: Sequence[UploadedFile]) -> AnalysisResult:
        """Post all files in one multipart request and return the result.

        Raises:
            AnalysisRequestError: on transport failure, a non-2xx status, or
                a body that is not a JSON object.
        """
        multipart = [
            ("files", (file.name, file.content, file.mime_type or DEFAULT_MIME_TYPE))
            for file in files
        ]
        try:
            response = self._http.post(self.ANALYZE_PATH, files=multipart)
        except httpx.HTTPError as exc:
            raise AnalysisRequestError(str(exc) or "Analysis failed") from exc

        if not response.is_success:
            raise AnalysisRequestError(
                self._error_message(response),
                status_code=response.status_code,
            )
        try:
            data = response.json()
        except ValueError as exc:
            raise AnalysisRequestError("Analysis service returned invalid JSON") from exc
        if not isinstance(data, dict):
            raise AnalysisRequestError("Analysis service returned an unexpected response")
        return data

    def close(self) -> None:
        self._http.close()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return f"HTTP error! status: {response.status_code}"
