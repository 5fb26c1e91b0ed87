from vani.analysis.analyzer import StyleAnalyzer
from vani.analysis.base import BaseStyleAnalyzer
from vani.analysis.factory import AnalyzerFactory
from vani.analysis.interpreter import interpret_response, render_result

__all__ = [
    "AnalyzerFactory",
    "BaseStyleAnalyzer",
    "StyleAnalyzer",
    "interpret_response",
    "render_result",
]
