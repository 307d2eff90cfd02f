import logging
from typing import Union

from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.concurrency import run_in_threadpool

from pdfchat.config import settings
from pdfchat.errors import MissingInput, UploadTooLarge
from pdfchat.models.schemas import ErrorResponse, UploadResponse
from pdfchat.services.document_store import DocumentStore
from pdfchat.services.pdf_extractor import PdfTextExtractor

logger = logging.getLogger(__name__)

router = APIRouter()


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store


def get_pdf_extractor(request: Request) -> PdfTextExtractor:
    return request.app.state.pdf_extractor


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 413: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def upload_pdf(
    pdfFile: Union[UploadFile, str, None] = File(None),
    store: DocumentStore = Depends(get_document_store),
    extractor: PdfTextExtractor = Depends(get_pdf_extractor),
):
    """Upload a PDF and make its text the current document"""
    # A plain form field under pdfFile is not a file part
    if not isinstance(pdfFile, UploadFile):
        raise MissingInput("No file uploaded.")

    content = await pdfFile.read()
    if len(content) > settings.max_upload_bytes:
        logger.warning(f"Rejected upload {pdfFile.filename}: {len(content)} bytes")
        raise UploadTooLarge()

    # PyPDF2 is CPU bound; keep it off the event loop
    text = await run_in_threadpool(extractor.extract_text, content)

    store.replace(text, pdfFile.filename)
    logger.info(f"File {pdfFile.filename} processed successfully. Character count: {len(text)}")

    return UploadResponse(
        message="File uploaded and processed successfully.",
        file_name=pdfFile.filename or "",
    )
