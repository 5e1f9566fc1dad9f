import io
import zipfile

from docx import Document as DocxDocument
from docx.opc.exceptions import PackageNotFoundError
from pdfminer.high_level import extract_text as extract_pdf_text
from pdfminer.pdfparser import PDFSyntaxError

from content_checker.config import ALLOWED_EXTENSIONS, MAX_FILE_SIZE_MB
from content_checker.errors import InputValidationError


def allowed_file(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def extract_text_from_file(content_bytes: bytes, filename: str) -> str:
    if not filename or not allowed_file(filename):
        raise InputValidationError(f"Invalid file type: {filename}")
    if len(content_bytes) > MAX_FILE_SIZE_MB * 1024 * 1024:
        raise InputValidationError(f"File exceeds {MAX_FILE_SIZE_MB} MB")

    ext = filename.rsplit(".", 1)[1].lower()
    try:
        if ext == "txt":
            return content_bytes.decode("utf-8", errors="ignore")
        if ext == "pdf":
            return extract_pdf_text(io.BytesIO(content_bytes))
        doc = DocxDocument(io.BytesIO(content_bytes))
        return "\n".join(p.text for p in doc.paragraphs)
    except (PDFSyntaxError, PackageNotFoundError, zipfile.BadZipFile, ValueError, KeyError) as e:
        raise InputValidationError(f"Could not extract text from {filename}") from e
