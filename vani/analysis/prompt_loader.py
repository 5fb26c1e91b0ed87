from pathlib import Path

from vani.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the style analysis prompt template.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled style_prompt.txt.

    Returns:
        The raw template string with a ``{json_schema}`` placeholder.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "style_prompt.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the analysis result schema that is embedded into the prompt.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / "style_schema.json"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load JSON schema: {exc}") from exc
