import base64
from dataclasses import dataclass, field

FALLBACK_SUMMARY = "Analysis completed but response format could not be parsed as JSON"

DEFAULT_MIME_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class DocumentPart:
    """One uploaded file, as sent to the AI provider."""

    name: str
    mime_type: str
    data: bytes = field(repr=False)

    @property
    def base64_data(self) -> str:
        return base64.b64encode(self.data).decode("ascii")

    @property
    def data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.base64_data}"


AnalysisResult = dict[str, object]
