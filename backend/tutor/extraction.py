from __future__ import annotations
import logging
from io import BytesIO
from typing import Optional

from pypdf import PdfReader

from .errors import ExtractionError, UnsupportedFileType

logger = logging.getLogger(__name__)

TEXT_TYPES = ("text/plain", "text/markdown")
TEXT_SUFFIXES = (".txt", ".md")


def _is_pdf(filename: str, content_type: Optional[str]) -> bool:
	return content_type == "application/pdf" or filename.lower().endswith(".pdf")


def _is_text(filename: str, content_type: Optional[str]) -> bool:
	return content_type in TEXT_TYPES or filename.lower().endswith(TEXT_SUFFIXES)


def extract_pdf_text(data: bytes) -> str:
	try:
		reader = PdfReader(BytesIO(data))
		full_text = ""
		for page in reader.pages:
			full_text += (page.extract_text() or "") + "\n"
	except Exception as err:
		logger.warning("PDF extraction failed: %s", err)
		raise ExtractionError("Failed to parse the PDF file. It may be corrupted or protected.") from err
	return full_text


def extract_text(filename: str, data: bytes, content_type: Optional[str] = None) -> str:
	"""Return the plain text of an uploaded .txt, .md or .pdf document."""
	filename = filename or ""
	if _is_text(filename, content_type):
		return data.decode("utf-8", errors="replace")
	if _is_pdf(filename, content_type):
		return extract_pdf_text(data)
	raise UnsupportedFileType("Please upload a .txt, .md, or .pdf file.")
