import logging

from fastapi import APIRouter, Depends, Request

from pdfchat.api.upload import get_document_store
from pdfchat.errors import MissingInput, NoDocumentLoaded
from pdfchat.models.schemas import ChatRequest, ChatResponse, ErrorResponse
from pdfchat.services.answer import AnswerService
from pdfchat.services.document_store import DocumentStore
from pdfchat.services.prompt import build_prompt

logger = logging.getLogger(__name__)

router = APIRouter()


def get_answer_service(request: Request) -> AnswerService:
    return request.app.state.answer_service


async def _read_question(request: Request) -> str:
    """Parse the chat body by hand so a bad body maps to MissingInput, not 422"""
    try:
        payload = ChatRequest.model_validate(await request.json())
    except ValueError:
        raise MissingInput()

    if payload.question is None or not payload.question.strip():
        raise MissingInput()

    return payload.question


@router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": ChatRequest.model_json_schema()}},
        }
    },
)
async def chat(
    request: Request,
    store: DocumentStore = Depends(get_document_store),
    answer_service: AnswerService = Depends(get_answer_service),
):
    """Answer a question about the currently loaded document"""
    # One snapshot per request; a concurrent upload cannot change it mid-prompt
    document = store.current()
    if document is None or not document.text:
        raise NoDocumentLoaded()

    question = await _read_question(request)

    prompt = build_prompt(document.text, question)
    answer = await answer_service.generate_answer(prompt)

    return ChatResponse(answer=answer)
