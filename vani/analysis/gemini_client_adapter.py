from collections.abc import Sequence

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from vani.analysis.client_base import BaseAnalysisClient
from vani.analysis.exceptions import AnalysisError, AnalysisNetworkError
from vani.analysis.models import DocumentPart


class GeminiClientAdapter(BaseAnalysisClient):
    """Analysis client built on the Google Gemini API.

    Every document travels as an inline-data part, followed by the prompt
    text, in a single generate_content call.
    """

    def __init__(self, *, api_key: str, timeout_seconds: int) -> None:
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_seconds * 1000),
        )

    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        documents: Sequence[DocumentPart],
    ) -> str:
        contents: list[types.Part | str] = [
            types.Part.from_bytes(data=doc.data, mime_type=doc.mime_type)
            for doc in documents
        ]
        contents.append(prompt)
        try:
            response = self._client.models.generate_content(
                model=model,
                contents=contents,
                config=types.GenerateContentConfig(temperature=temperature),
            )
        except (httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(f"AI provider network error: {exc}") from exc
        except genai_errors.APIError as exc:
            raise AnalysisNetworkError(f"AI provider API error: {exc}") from exc

        text = response.text
        if not text:
            raise AnalysisError("AI returned empty response")
        return text
