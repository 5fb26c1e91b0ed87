import mimetypes

from fastapi import APIRouter, Request, status
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile

from vani.analysis.base import BaseStyleAnalyzer
from vani.analysis.exceptions import FileProcessingError
from vani.analysis.models import DEFAULT_MIME_TYPE, DocumentPart
from vani.api.errors import NO_FILES_MESSAGE, error_message_for
from vani.logging.logger import Log

router = APIRouter()


@router.post("/api/analyze", tags=["Analysis"], summary="Analyze writing style")
async def analyze(request: Request) -> JSONResponse:
    """
    Analyze the writing style of the uploaded documents.

    Expects multipart form data with one or more ``files`` fields. All files
    are analyzed together and one combined result is returned. When the
    model reply is not JSON the result has the fallback shape
    ``{raw_response, analysis_summary}``.
    """
    analyzer: BaseStyleAnalyzer | None = request.app.state.analyzer
    if analyzer is None:
        return _error(request.app.state.configuration_error, status.HTTP_500_INTERNAL_SERVER_ERROR)

    try:
        form = await request.form()
        uploads = [item for item in form.getlist("files") if isinstance(item, UploadFile)]
        if not uploads:
            return _error(NO_FILES_MESSAGE, status.HTTP_400_BAD_REQUEST)

        Log.info(
            f"Received {len(uploads)} file(s) for analysis: "
            + ", ".join(upload.filename or "<unnamed>" for upload in uploads)
        )
        documents = [await _read_document(upload) for upload in uploads]
        result = await run_in_threadpool(analyzer.analyze, documents)
        return JSONResponse(result)
    except Exception as exc:
        Log.exception(f"Analysis error: {exc}")
        return _error(error_message_for(exc), status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.get("/health", tags=["Health"], summary="Service health check")
async def health(request: Request) -> dict[str, object]:
    return {
        "status": "ok",
        "provider": request.app.state.provider,
        "configured": request.app.state.analyzer is not None,
    }


async def _read_document(upload: UploadFile) -> DocumentPart:
    name = upload.filename or ""
    try:
        data = await upload.read()
    except Exception as exc:
        raise FileProcessingError(name) from exc
    mime_type = upload.content_type or mimetypes.guess_type(name)[0] or DEFAULT_MIME_TYPE
    return DocumentPart(name=name, mime_type=mime_type, data=data)


def _error(message: str, status_code: int) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)
