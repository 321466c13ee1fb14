"""
Text Extractor - file bytes of a declared type to normalized plain text
"""
import re
from typing import Callable, Dict

from resume_matcher.core.exceptions import UnsupportedFormat
from resume_matcher.services.parsing.pdf_parser import PDFParser
from resume_matcher.services.parsing.docx_parser import DOCXParser


LEGACY_DOC_MESSAGE = "Legacy DOC format - please convert to DOCX or PDF"

TXT = "txt"
PDF = "pdf"
DOCX = "docx"
DOC = "doc"

# Extension or MIME type -> canonical format
FILE_TYPES: Dict[str, str] = {
    "txt": TXT,
    "text/plain": TXT,
    "pdf": PDF,
    "application/pdf": PDF,
    "docx": DOCX,
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": DOCX,
    "doc": DOC,
    "application/msword": DOC,
}

_NON_PRINTABLE = re.compile(r"[^\x20-\x7E\s]")
_WHITESPACE = re.compile(r"\s+")


def resolve_file_type(file_type: str) -> str:
    """
    Map a declared extension or MIME type onto a supported format

    Raises:
        UnsupportedFormat: no extraction rule for the type
    """
    key = (file_type or "").strip().lower().lstrip(".")
    try:
        return FILE_TYPES[key]
    except KeyError:
        raise UnsupportedFormat(file_type)


def normalize_text(text: str) -> str:
    """Printable ASCII only, single spaces, single line"""
    text = _NON_PRINTABLE.sub(" ", text)
    text = _WHITESPACE.sub(" ", text)
    return text.strip()


class TextExtractor:
    """Dispatches file bytes to the parser for their declared type"""

    def __init__(self, pdf_parser: PDFParser = None, docx_parser: DOCXParser = None):
        self.pdf_parser = pdf_parser or PDFParser()
        self.docx_parser = docx_parser or DOCXParser()
        self._handlers: Dict[str, Callable[[bytes], str]] = {
            TXT: self._extract_txt,
            PDF: self.pdf_parser.extract_text,
            DOCX: self.docx_parser.extract_text,
            DOC: self._extract_legacy_doc,
        }

    def extract_text(self, content: bytes, file_type: str) -> str:
        """
        Extract and normalize text

        Args:
            content: raw file bytes
            file_type: extension ("pdf") or MIME type ("application/pdf")

        Returns:
            normalized text

        Raises:
            UnsupportedFormat: unrecognized file type
            ExtractionFailed: recognized type whose parser broke
        """
        handler = self._handlers[resolve_file_type(file_type)]
        return normalize_text(handler(content))

    def _extract_txt(self, content: bytes) -> str:
        return content.decode("utf-8", errors="replace")

    def _extract_legacy_doc(self, content: bytes) -> str:
        # .doc is not parsed; the user is asked to convert it
        return LEGACY_DOC_MESSAGE
