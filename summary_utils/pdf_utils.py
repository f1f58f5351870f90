import base64
import io
import logging
from dataclasses import dataclass
from typing import Optional

from PyPDF2 import PdfReader

logger = logging.getLogger(__name__)

PDF_MIME_TYPE = "application/pdf"


@dataclass(frozen=True)
class FileContent:
    data: bytes
    mime_type: str = PDF_MIME_TYPE

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


@dataclass(frozen=True)
class SelectedFile:
    name: str
    content: FileContent
    page_count: Optional[int] = None


def count_pages(data: bytes) -> Optional[int]:
    # Informational only: Gemini may still read files PyPDF2 rejects.
    try:
        reader = PdfReader(io.BytesIO(data))
        return len(reader.pages) or None
    except Exception as e:
        logger.info(f"Could not count PDF pages: {e}")
        return None


def select_pdf(name: str, mime_type: Optional[str], data: bytes) -> Optional[SelectedFile]:
    """
    Register a file for upload mode.

    Anything that is not application/pdf is rejected by returning None,
    which the page treats as "no file selected".
    """
    if mime_type != PDF_MIME_TYPE:
        logger.info(f"Rejected non-PDF selection {name!r} ({mime_type})")
        return None
    if not data:
        return None
    return SelectedFile(name=name, content=FileContent(data=data), page_count=count_pages(data))


def read_uploaded_pdf(uploaded) -> Optional[SelectedFile]:
    """Read a Streamlit UploadedFile into memory. Read errors mean no file."""
    if uploaded is None:
        return None
    try:
        data = uploaded.getvalue()
    except OSError as e:
        logger.error(f"Error reading file {getattr(uploaded, 'name', '?')}: {e}")
        return None
    return select_pdf(uploaded.name, uploaded.type, data)
