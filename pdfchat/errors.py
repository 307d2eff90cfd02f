"""
Error taxonomy for the upload and chat endpoints.

Every error carries the HTTP status and the short message returned to the
client as ``{"error": message}``.
"""

from typing import Optional


class DocumentChatError(Exception):
    status_code = 500
    message = "Internal server error."

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.message
        super().__init__(self.message)


class MissingInput(DocumentChatError):
    """No file part on upload, or no usable question on chat"""

    status_code = 400
    message = "Question is required."


class NoDocumentLoaded(DocumentChatError):
    status_code = 400
    message = "No document has been processed. Please upload a PDF first."


class ExtractionFailure(DocumentChatError):
    """The PDF extractor rejected or could not parse the uploaded bytes"""

    status_code = 500
    message = "Failed to process PDF file."


class ModelFailure(DocumentChatError):
    """The language model could not be reached or returned an error"""

    status_code = 500
    message = "An error occurred while communicating with the AI."


class UploadTooLarge(DocumentChatError):
    status_code = 413
    message = "File size exceeds limit (10 MB)."
