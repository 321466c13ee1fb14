"""
DOCX Parser - extract text from DOCX bytes
"""
import io
import re

from docx import Document

from resume_matcher.core.exceptions import ExtractionFailed


_PARAGRAPH_OPEN = re.compile(r"<w:p[^>]*>")
_TAB = re.compile(r"<w:tab[^>]*/>")
_ANY_TAG = re.compile(r"<[^>]+>")
_BLANK_LINES = re.compile(r"\n\s*\n")


class DOCXParser:
    """DOCX file parser"""

    def extract_text(self, content: bytes) -> str:
        """
        Extract text from a DOCX file

        The main document part is read out of the package and its markup is
        stripped: paragraph starts become newlines, tabs become spaces, all
        other tags are dropped and blank lines are collapsed.

        Args:
            content: raw DOCX bytes

        Returns:
            extracted text (not yet normalized)

        Raises:
            ExtractionFailed: the package or its main part cannot be read
        """
        try:
            xml = self._main_document_xml(content)
        except Exception as e:
            raise ExtractionFailed(f"Error parsing DOCX file: {e}", file_type="docx", cause=e)

        return self._strip_markup(xml)

    def _main_document_xml(self, content: bytes) -> str:
        document = Document(io.BytesIO(content))
        return document.part.blob.decode("utf-8")

    def _strip_markup(self, xml: str) -> str:
        text = _PARAGRAPH_OPEN.sub("\n", xml)
        text = _TAB.sub(" ", text)
        text = _ANY_TAG.sub("", text)
        text = _BLANK_LINES.sub("\n", text)
        return text.strip()
