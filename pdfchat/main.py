import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pdfchat.api import chat, upload
from pdfchat.config import settings
from pdfchat.errors import DocumentChatError, UploadTooLarge
from pdfchat.services.answer import AnswerService
from pdfchat.services.document_store import DocumentStore
from pdfchat.services.pdf_extractor import pdf_extractor

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup
    logger.info(f"Starting {settings.app_name}...")

    app.state.document_store = DocumentStore()
    app.state.pdf_extractor = pdf_extractor
    app.state.answer_service = AnswerService()

    yield

    # Shutdown
    logger.info("Shutting down...")
    app.state.document_store.clear()
    await app.state.answer_service.close()


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def limit_upload_size(request: Request, call_next):
    """Reject oversize bodies before they are parsed"""
    content_length = request.headers.get("content-length")
    if content_length and content_length.isdigit() and int(content_length) > settings.max_upload_bytes:
        logger.warning(f"Rejected {request.url.path}: content-length {content_length} exceeds limit")
        error = UploadTooLarge()
        return JSONResponse(status_code=error.status_code, content={"error": error.message})
    return await call_next(request)


@app.exception_handler(DocumentChatError)
async def document_chat_error_handler(request: Request, exc: DocumentChatError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


# Include routers
app.include_router(upload.router, prefix="/api", tags=["Upload"])
app.include_router(chat.router, prefix="/api", tags=["Chat"])


@app.get("/")
def root():
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
def health_check(request: Request):
    return {
        "status": "healthy",
        "document_loaded": request.app.state.document_store.has_document(),
    }


def run():
    logger.info(f"Server is running on http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    run()
