"""
PDF text extraction using PyPDF2
"""

import io
import logging

import PyPDF2

from pdfchat.errors import ExtractionFailure

logger = logging.getLogger(__name__)


class PdfTextExtractor:
    def extract_text(self, pdf_bytes: bytes) -> str:
        """Extract plain text from raw PDF bytes.

        Pages are joined with a blank line. Raises ExtractionFailure when
        the bytes cannot be parsed as a PDF.
        """
        text = ""

        try:
            pdf_reader = PyPDF2.PdfReader(io.BytesIO(pdf_bytes))

            for page in pdf_reader.pages:
                page_text = page.extract_text()

                if page_text:
                    text += page_text + "\n\n"

        except Exception as e:
            logger.error(f"Error extracting text from PDF: {e}", exc_info=True)
            raise ExtractionFailure() from e

        return text.strip()


# Singleton instance
pdf_extractor = PdfTextExtractor()
