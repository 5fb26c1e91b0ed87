from collections.abc import Callable

import pytest

from vani.intake.models import UploadedFile


@pytest.fixture()
def make_file() -> Callable[..., UploadedFile]:
    """Build an UploadedFile; size defaults to the content length."""

    def _make(
        name: str,
        size: int | None = None,
        content: bytes = b"Call me Ishmael.",
        mime_type: str = "text/plain",
    ) -> UploadedFile:
        return UploadedFile(
            name=name,
            size=len(content) if size is None else size,
            mime_type=mime_type,
            content=content,
        )

    return _make


@pytest.fixture()
def style_result() -> dict[str, object]:
    """A well-formed analysis result."""
    return {
        "overall_style_summary": "x",
        "diction": {
            "word_choice": "Formal",
            "word_economy": "Verbose",
            "notable_word_choices": ["perspicacious", "ineffable"],
        },
        "syntax": {
            "sentence_structure": "Periodic sentences",
            "average_sentence_length_words": 27.5,
        },
        "tone": {
            "overall_tone": "Elegiac",
            "rhetorical_appeals_used": ["pathos", "ethos"],
        },
        "rhetorical_patterns": "Anaphora",
        "narrative_perspective": "Third person omniscient",
    }
