"""Offline analysis client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseAnalysisClient and register the provider in AnalyzerFactory.
"""

import json
from collections.abc import Sequence
from typing import ClassVar

from vani.analysis.client_base import BaseAnalysisClient
from vani.analysis.models import DocumentPart


class ExampleClientAdapter(BaseAnalysisClient):
    """Adapter that answers with a fixed analysis wrapped in a json fence.

    No network calls. Useful for local development and tests, and it
    exercises the same reply interpretation path as real providers.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "overall_style_summary": "Plain, direct prose with short declarative sentences.",
        "diction": {
            "word_choice": "Concrete and colloquial",
            "word_economy": "Economical; few modifiers",
            "notable_word_choices": [],
        },
        "syntax": {
            "sentence_structure": "Mostly simple and compound sentences",
            "average_sentence_length_words": 12,
        },
        "tone": {
            "overall_tone": "Neutral",
            "rhetorical_appeals_used": ["logos"],
        },
        "rhetorical_patterns": "Repetition for emphasis",
        "narrative_perspective": "First person",
    }

    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        documents: Sequence[DocumentPart],
    ) -> str:
        _ = model, temperature, prompt, documents
        return "```json\n" + json.dumps(self.DEFAULT_RESPONSE, indent=2) + "\n```"
