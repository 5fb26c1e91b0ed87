"""Client-side intake rules for documents offered for analysis."""

from collections.abc import Sequence

from vani.intake.exceptions import FileTooLargeError, IntakeError, UnsupportedFormatError
from vani.intake.models import Diagnostic, IntakeResult, Severity, UploadedFile

MAX_FILES = 5
MAX_FILE_SIZE = 10 * 1024 * 1024
ALLOWED_EXTENSIONS = (".txt", ".docx", ".pdf")

INVALID_FILE_TITLE = "Invalid file"
LIMIT_REACHED_TITLE = "File limit reached"


def file_extension(name: str) -> str:
    """Return the lowercased final dot-segment of ``name`` with a leading dot.

    A name without any dot yields ``"." + name``, which never matches an
    allowed extension.
    """
    return "." + name.rsplit(".", 1)[-1].lower()


def validate_file(file: UploadedFile) -> None:
    """Check one file against the size and format limits.

    Raises:
        FileTooLargeError: if the file is larger than MAX_FILE_SIZE.
        UnsupportedFormatError: if the extension is not in ALLOWED_EXTENSIONS.
    """
    if file.size > MAX_FILE_SIZE:
        raise FileTooLargeError(
            f'File "{file.name}" is too large. Maximum size is 10MB.',
            file_name=file.name,
        )
    if file_extension(file.name) not in ALLOWED_EXTENSIONS:
        raise UnsupportedFormatError(
            f'File "{file.name}" has an unsupported format. '
            "Only .txt, .docx, and .pdf files are allowed.",
            file_name=file.name,
        )


def accept_files(
    existing: Sequence[UploadedFile],
    offered: Sequence[UploadedFile],
) -> IntakeResult:
    """Compute the next accepted set after the user offers a new batch.

    Invalid files are reported and skipped without blocking the rest of the
    batch. Valid files are appended in offered order until MAX_FILES is
    reached. A batch with no valid file clears a non-empty selection.
    """
    diagnostics: list[Diagnostic] = []
    valid: list[UploadedFile] = []
    for file in offered:
        try:
            validate_file(file)
        except IntakeError as exc:
            diagnostics.append(Diagnostic(Severity.ERROR, INVALID_FILE_TITLE, str(exc)))
            continue
        valid.append(file)

    incoming = len(valid)
    if incoming == 0:
        # The newest pick defines intent, even when it held nothing usable.
        return IntakeResult(accepted=(), diagnostics=tuple(diagnostics))

    room = max(0, MAX_FILES - len(existing))
    admitted = valid[:room]
    if incoming > room:
        diagnostics.append(_limit_warning(room, incoming))
    return IntakeResult(
        accepted=tuple(existing) + tuple(admitted),
        diagnostics=tuple(diagnostics),
    )


def is_at_capacity(files: Sequence[UploadedFile]) -> bool:
    """True when no further file can be staged."""
    return len(files) >= MAX_FILES


def exceeds_limit(files: Sequence[UploadedFile]) -> bool:
    """True when a set handed in from elsewhere already holds too many files."""
    return len(files) > MAX_FILES


def _limit_warning(added: int, incoming: int) -> Diagnostic:
    return Diagnostic(
        Severity.WARNING,
        LIMIT_REACHED_TITLE,
        f"Only {added} of {incoming} files were added. Maximum {MAX_FILES} files allowed.",
    )
