from abc import ABC, abstractmethod
from collections.abc import Sequence

from vani.analysis.models import AnalysisResult, DocumentPart


class BaseStyleAnalyzer(ABC):
    """Contract for all writing style analyzers."""

    @abstractmethod
    def analyze(self, documents: Sequence[DocumentPart]) -> AnalysisResult:
        """Analyze all documents jointly and return one combined result.

        Args:
            documents: The uploaded files, in upload order.

        Returns:
            The parsed analysis object, or the fallback shape when the
            provider reply is not JSON.

        Raises:
            AnalysisError: if the provider call fails.
        """
