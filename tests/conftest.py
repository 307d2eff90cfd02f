import pytest
from fastapi.testclient import TestClient
from unittest.mock import AsyncMock, MagicMock, Mock
from typing import Generator
import os

# Set test environment
os.environ["ANTHROPIC_API_KEY"] = "test-key"

from pdfchat.main import app
from pdfchat.services.answer import AnswerService
from pdfchat.services.document_store import DocumentStore
from pdfchat.services.pdf_extractor import PdfTextExtractor


def make_pdf(text: str) -> bytes:
    """Build a single-page PDF that renders ``text`` in Helvetica"""
    escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
    stream = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")

    objects = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids [3 0 R] /Count 1 >>",
        b"<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
        b"/Contents 4 0 R /Resources << /Font << /F1 5 0 R >> >> >>",
        b"<< /Length " + str(len(stream)).encode() + b" >>\nstream\n" + stream + b"\nendstream",
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]

    pdf = b"%PDF-1.4\n"
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(pdf))
        pdf += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"

    xref_offset = len(pdf)
    pdf += f"xref\n0 {len(objects) + 1}\n".encode()
    pdf += b"0000000000 65535 f \n"
    for offset in offsets:
        pdf += f"{offset:010d} 00000 n \n".encode()
    pdf += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_offset}\n%%EOF\n"
    ).encode()
    return pdf


@pytest.fixture
def client() -> Generator:
    """Create test client"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def document_store(client) -> DocumentStore:
    """The store owned by the running app"""
    return app.state.document_store


@pytest.fixture
def mock_answer_service(client):
    """Replace the Claude-backed answer service on the app"""
    mock = AsyncMock(spec=AnswerService)
    mock.generate_answer.return_value = "Blue."
    app.state.answer_service = mock
    return mock


@pytest.fixture
def mock_extractor(client):
    """Replace the PDF extractor on the app"""
    mock = Mock(spec=PdfTextExtractor)
    mock.extract_text = MagicMock(return_value="The sky is blue.")
    app.state.pdf_extractor = mock
    return mock


@pytest.fixture
def mock_claude_client():
    """Mock AsyncAnthropic client"""
    mock = MagicMock()
    mock.messages.create = AsyncMock(
        return_value=MagicMock(content=[MagicMock(type="text", text="Blue.")])
    )
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def sample_pdf() -> bytes:
    """One-page PDF whose text is 'The sky is blue.'"""
    return make_pdf("The sky is blue.")


@pytest.fixture
def pdf_factory():
    """Build PDFs with arbitrary text"""
    return make_pdf
