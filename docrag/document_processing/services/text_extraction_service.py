"""
Text Extraction Service

Responsible for:
    - Turning uploaded file bytes into the text stored (and embedded) per document
    - txt / md      → UTF-8 text
    - csv           → structure header + complete CSV data
    - pdf           → pdfplumber
    - docx          → python-docx
    - anything else → short descriptive placeholder

No S3 logic, no database logic.
"""

# Python Packages
import csv
from io import BytesIO, StringIO
import pdfplumber
from docx import Document

# Exceptions
from ...util.exceptions import ServiceException

# Messages
from ...util import messages


TEXT_MIME_TYPES = {"text/plain", "text/markdown"}
CSV_MIME_TYPES  = {"text/csv", "application/csv"}
DOCX_MIME_TYPE  = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"





class TextExtractionService:

    def extract(self, file_bytes: bytes, file_name: str, mime_type: str = "") -> str:
        """
        Extract text from an uploaded file.

        Args:
            file_bytes (bytes): Raw upload
            file_name (str):    Original file name (extension drives detection)
            mime_type (str):    Browser-reported MIME type, may be generic

        Returns:
            str
        """

        extension = self.extension_of(file_name)
        mime_type = (mime_type or "").lower()

        try:
            if mime_type in TEXT_MIME_TYPES or extension in {"txt", "md"}:
                return self._decode(file_bytes)

            if mime_type in CSV_MIME_TYPES or extension == "csv":
                return self._extract_csv(file_bytes, file_name)

            if mime_type == "application/pdf" or extension == "pdf":
                return self._extract_pdf(file_bytes)

            if mime_type == DOCX_MIME_TYPE or extension == "docx":
                return self._extract_docx(file_bytes)

            return self._placeholder(file_bytes, file_name, mime_type)

        except Exception as error:
            raise ServiceException(
                error_code = "TEXT_EXTRACTION_FAILED",
                message = messages.ERROR["TEXT_EXTRACTION_FAILED"].format(file_name = file_name),
                details = str(error)
            )


    @staticmethod
    def extension_of(file_name: str) -> str:
        if not file_name or "." not in file_name:
            return ""
        return file_name.rsplit(".", 1)[-1].lower()



    def _decode(self, file_bytes: bytes) -> str:
        return file_bytes.decode("utf-8", errors = "replace")



    def _extract_csv(self, file_bytes: bytes, file_name: str) -> str:
        """
        Keep the complete CSV so every row is available as context,
        prefixed with a short description of its structure
        """

        raw = self._decode(file_bytes)
        rows = [row for row in csv.reader(StringIO(raw)) if any(cell.strip() for cell in row)]

        headers = [header.strip() for header in rows[0]] if rows else []
        data_rows = max(len(rows) - 1, 0)

        return (
            f"CSV Document: {file_name}\n\n"
            f"This is a CSV file with the following structure:\n"
            f"Headers: {', '.join(headers)}\n"
            f"Total Rows: {data_rows} data rows\n\n"
            f"COMPLETE CSV DATA:\n{raw}"
        )



    def _extract_pdf(self, file_bytes: bytes) -> str:
        pages = []

        with pdfplumber.open(BytesIO(file_bytes)) as pdf:
            for page in pdf.pages:
                page_text = page.extract_text()
                if page_text:
                    pages.append(page_text)

        return "\n".join(pages)



    def _extract_docx(self, file_bytes: bytes) -> str:
        document = Document(BytesIO(file_bytes))
        return "\n".join(
            paragraph.text for paragraph in document.paragraphs
        )



    def _placeholder(self, file_bytes: bytes, file_name: str, mime_type: str) -> str:
        # Legacy .doc and opaque binaries: describe the file instead of guessing at text
        return (
            f"Document: {file_name}\n"
            f"File Type: {mime_type or 'unknown'}\n"
            f"Size: {len(file_bytes)} bytes"
        )
