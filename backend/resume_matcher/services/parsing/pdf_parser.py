"""
PDF Parser - extract text from PDF bytes
"""
import re

import fitz  # PyMuPDF

from resume_matcher.core.logging import logger


NO_TEXT_FOUND = "No text content found in PDF."
FALLBACK_FAILED = "Failed to parse PDF and fallback failed."

# Content streams usually carry literal strings as "(...) Tj"
_LITERAL_STRING = re.compile(r"\((.*?)\)")


class PDFParser:
    """PDF file parser"""

    def extract_text(self, content: bytes) -> str:
        """
        Extract text from a PDF

        Never raises: when PyMuPDF cannot read the file a heuristic scan of the
        raw bytes is used, and when nothing at all is recovered a fixed
        sentinel string is returned so the pipeline carries on.

        Args:
            content: raw PDF bytes

        Returns:
            extracted text (not yet normalized)
        """
        try:
            text = self._extract_with_pymupdf(content)
        except Exception as e:
            logger.warning(f"PyMuPDF could not parse PDF, using literal-string scan: {e}")
            return self._extract_literal_strings(content) or FALLBACK_FAILED

        return text or NO_TEXT_FOUND

    def _extract_with_pymupdf(self, content: bytes) -> str:
        doc = fitz.open(stream=content, filetype="pdf")
        try:
            return "".join(page.get_text() for page in doc)
        finally:
            doc.close()

    def _extract_literal_strings(self, content: bytes) -> str:
        """Concatenate every parenthesized run found in the raw byte stream"""
        raw = content.decode("utf-8", errors="replace")
        return "".join(match.group(1) + " " for match in _LITERAL_STRING.finditer(raw))
