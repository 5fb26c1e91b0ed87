from vani.intake.models import Diagnostic, IntakeResult, Severity, UploadedFile
from vani.intake.validator import (
    ALLOWED_EXTENSIONS,
    MAX_FILE_SIZE,
    MAX_FILES,
    accept_files,
    exceeds_limit,
    is_at_capacity,
    validate_file,
)

__all__ = [
    "ALLOWED_EXTENSIONS",
    "MAX_FILES",
    "MAX_FILE_SIZE",
    "Diagnostic",
    "IntakeResult",
    "Severity",
    "UploadedFile",
    "accept_files",
    "exceeds_limit",
    "is_at_capacity",
    "validate_file",
]
