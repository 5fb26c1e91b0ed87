from typing import ClassVar

from vani.analysis.analyzer import StyleAnalyzer
from vani.analysis.example_client_adapter import ExampleClientAdapter
from vani.analysis.exceptions import AnalysisConfigurationError
from vani.analysis.gemini_client_adapter import GeminiClientAdapter
from vani.analysis.openai_client_adapter import OpenAIClientAdapter
from vani.config.settings import Settings

GEMINI_KEY_MISSING = (
    "Google Gemini AI API key is not configured. Please contact the administrator."
)
OPENAI_KEY_MISSING = "OpenAI API key is not configured. Please contact the administrator."


class AnalyzerFactory:
    """Creates the style analyzer for the configured provider."""

    PROVIDERS: ClassVar[tuple[str, ...]] = ("example", "gemini", "openai")

    @classmethod
    def create(cls, settings: Settings) -> StyleAnalyzer:
        """Create a configured analyzer from application settings.

        Raises:
            AnalysisConfigurationError: if the provider's API key is missing.
            ValueError: if the provider is unknown.
        """
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return StyleAnalyzer(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
            )
        if provider == "gemini":
            api_key = settings.google_generative_ai_api_key.strip()
            if not api_key:
                raise AnalysisConfigurationError(GEMINI_KEY_MISSING)
            return StyleAnalyzer(
                client=GeminiClientAdapter(
                    api_key=api_key,
                    timeout_seconds=settings.gemini_timeout_seconds,
                ),
                model=settings.gemini_model_name,
                temperature=settings.analysis_temperature,
            )
        if provider == "openai":
            api_key = settings.openai_api_key.strip()
            if not api_key:
                raise AnalysisConfigurationError(OPENAI_KEY_MISSING)
            return StyleAnalyzer(
                client=OpenAIClientAdapter(
                    api_key=api_key,
                    timeout_seconds=settings.openai_timeout_seconds,
                ),
                model=settings.openai_model_name,
                temperature=settings.analysis_temperature,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
