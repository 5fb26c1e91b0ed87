from abc import ABC, abstractmethod
from collections.abc import Sequence

from vani.analysis.models import DocumentPart


class BaseAnalysisClient(ABC):
    """Contract for provider-specific generative AI clients."""

    @abstractmethod
    def generate_content(
        self,
        *,
        model: str,
        temperature: float,
        prompt: str,
        documents: Sequence[DocumentPart],
    ) -> str:
        """Send the documents plus the prompt in one call and return the reply text."""
