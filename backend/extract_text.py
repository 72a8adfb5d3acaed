import logging

import fitz

from config import PDF_CONTENT_TYPE
from errors import ExtractionFailed, InvalidFileType


logger = logging.getLogger(__name__)



def is_pdf(file) -> bool:
    return file is not None and getattr(file, "type", None) == PDF_CONTENT_TYPE



def extract_pdf_text(data: bytes) -> str:
    text = ""
    with fitz.open(stream=data, filetype="pdf") as doc:
        for page in doc:
            text += page.get_text()
    return text.strip()



def extract_text(file, extractor=None) -> str:
    """
    Returns the text of an uploaded study guide.

    `file` needs a `type` (content type) and `getvalue()`, like Streamlit's
    UploadedFile. Anything that is not a PDF is rejected before the
    extractor is touched.
    """
    if not is_pdf(file):
        raise InvalidFileType()

    extractor = extractor or extract_pdf_text
    try:
        return extractor(file.getvalue())
    except Exception as e:
        logger.error("Failed to extract text from pdf %s: %s", getattr(file, "name", "<upload>"), e)
        raise ExtractionFailed() from e
