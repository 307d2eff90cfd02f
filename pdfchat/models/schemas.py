from typing import Optional

from pydantic import BaseModel, Field


# Request/Response Schemas
class UploadResponse(BaseModel):
    """Confirmation returned after a PDF has been processed"""

    model_config = {"populate_by_name": True}

    message: str
    file_name: str = Field(..., alias="fileName")


class ChatRequest(BaseModel):
    question: Optional[str] = Field(None, description="Question about the uploaded document")


class ChatResponse(BaseModel):
    answer: str


class ErrorResponse(BaseModel):
    error: str
