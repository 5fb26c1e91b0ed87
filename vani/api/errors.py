"""Maps failures at the request boundary to user-facing messages."""

from vani.analysis.exceptions import FileProcessingError

NO_FILES_MESSAGE = "No files provided for analysis. Please select at least one file."
CONFIGURATION_MESSAGE = "AI service configuration error. Please try again later."
NETWORK_MESSAGE = "Network error. Please check your connection and try again."


def error_message_for(exc: BaseException) -> str:
    """Return the message sent to the client for an unexpected failure."""
    if isinstance(exc, FileProcessingError):
        return str(exc)
    message = str(exc)
    if "API key" in message:
        return CONFIGURATION_MESSAGE
    if "Failed to process file" in message:
        return message
    if "network" in message or "fetch" in message:
        return NETWORK_MESSAGE
    return f"Analysis failed: {message}"
