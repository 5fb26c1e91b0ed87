from vani.client.api_client import AnalyzeApiClient
from vani.client.files import load_local_file
from vani.client.session import AnalysisSession, SessionState

__all__ = ["AnalysisSession", "AnalyzeApiClient", "SessionState", "load_local_file"]
