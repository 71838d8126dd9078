"""
Resume text extraction for uploaded PDF and DOCX files.
"""
import io
import logging

import docx
import fitz  # pymupdf

from app.core.exceptions import UnsupportedFormat, ExtractionFailure

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"
DOCX_MIME = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"

SUPPORTED_MIME_TYPES = (PDF_MIME, DOCX_MIME)


def is_supported(mime_type: str) -> bool:
    return mime_type in SUPPORTED_MIME_TYPES


def parse_pdf(content: bytes) -> str:
    text = ""
    with fitz.open(stream=content, filetype="pdf") as doc:
        # PyMuPDF sniffs the stream and will happily open other formats
        if not doc.is_pdf:
            raise ValueError("Stream is not a PDF document")
        for page in doc:
            text += page.get_text()
    return text


def parse_docx(content: bytes) -> str:
    document = docx.Document(io.BytesIO(content))
    return "\n".join(paragraph.text for paragraph in document.paragraphs)


def extract_text(content: bytes, mime_type: str) -> str:
    """
    Convert an uploaded resume into plain text.
    
    The declared MIME type picks the parser; the bytes are not sniffed.
    
    Raises:
        UnsupportedFormat: MIME type is neither PDF nor DOCX
        ExtractionFailure: The parser could not read the file
    """
    if mime_type == PDF_MIME:
        parser = parse_pdf
    elif mime_type == DOCX_MIME:
        parser = parse_docx
    else:
        raise UnsupportedFormat()
    
    try:
        return parser(content)
    except Exception as e:
        logger.warning(f"Resume extraction failed for {mime_type}: {e}")
        raise ExtractionFailure() from e
