from collections.abc import Sequence

import httpx
import openai

from vani.analysis.client_base import BaseAnalysisClient
from vani.analysis.exceptions import AnalysisError, AnalysisNetworkError
from vani.analysis.models import DocumentPart


class OpenAIClientAdapter(BaseAnalysisClient):
    """Analysis client built on the OpenAI chat API with file content parts."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        documents: Sequence[DocumentPart],
    ) -> str:
        content: list[dict[str, object]] = [
            {
                "type": "file",
                "file": {"filename": doc.name, "file_data": doc.data_url},
            }
            for doc in documents
        ]
        content.append({"type": "text", "text": prompt})
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                messages=[{"role": "user", "content": content}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise AnalysisNetworkError(
                f"AI provider network error: {exc}"
            ) from exc
        except openai.APIError as exc:
            raise AnalysisNetworkError(
                f"AI provider API error: {exc}"
            ) from exc

        if not response.choices:
            raise AnalysisError("AI returned no choices")
        text = response.choices[0].message.content
        if not text:
            raise AnalysisError("AI returned empty response")
        return text
