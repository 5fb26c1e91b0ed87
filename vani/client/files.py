import mimetypes
from pathlib import Path

from vani.analysis.models import DEFAULT_MIME_TYPE
from vani.intake.models import UploadedFile


def load_local_file(path: Path) -> UploadedFile:
    """Read a file from disk into an UploadedFile.

    The MIME type is guessed from the name and stays advisory.

    Raises:
        FileNotFoundError: if the file does not exist.
    """
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    content = path.read_bytes()
    mime_type = mimetypes.guess_type(path.name)[0] or DEFAULT_MIME_TYPE
    return UploadedFile(name=path.name, size=len(content), mime_type=mime_type, content=content)
