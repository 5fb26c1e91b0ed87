"""AI-powered writing style analyzer."""

from collections.abc import Sequence
from pathlib import Path

from vani.analysis.base import BaseStyleAnalyzer
from vani.analysis.client_base import BaseAnalysisClient
from vani.analysis.exceptions import AnalysisError
from vani.analysis.interpreter import interpret_response, is_fallback
from vani.analysis.models import AnalysisResult, DocumentPart
from vani.analysis.prompt_loader import load_json_schema, load_prompt_template
from vani.logging.logger import Log


class StyleAnalyzer(BaseStyleAnalyzer):
    """Sends documents to an AI provider and interprets its reply."""

    def __init__(
        self,
        *,
        client: BaseAnalysisClient,
        model: str,
        temperature: float = 0.2,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._prompt = load_prompt_template(prompt_template_path).format(
            json_schema=load_json_schema(json_schema_path),
        )

    @property
    def model(self) -> str:
        return self._model

    def analyze(self, documents: Sequence[DocumentPart]) -> AnalysisResult:
        """Run one provider call over all documents and interpret the reply."""
        if not documents:
            raise AnalysisError("No documents to analyze")
        Log.info(
            f"Analyzing {len(documents)} document(s) with {self._model}: "
            + ", ".join(doc.name for doc in documents)
        )

        raw_response = self._client.generate_content(
            model=self._model,
            temperature=self._temperature,
            prompt=self._prompt,
            documents=documents,
        )
        Log.debug(f"AI raw response:\n{raw_response}")

        result = interpret_response(raw_response)
        if is_fallback(result):
            Log.warning("AI response could not be parsed as JSON, returning raw text")
        else:
            Log.info(f"Analysis complete: {len(result)} top-level fields")
        return result
