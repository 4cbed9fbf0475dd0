"""
Upload checks for teacher materials.

Only the file metadata is inspected; text extraction happens elsewhere.
"""

PDF_CONTENT_TYPE = "application/pdf"
MAX_UPLOAD_BYTES = 10 * 1024 * 1024  # 10MB


def validate_pdf_upload(content_type: str, size_bytes: int) -> tuple[bool, str | None]:
    """
    Check an uploaded file before extraction.

    Returns:
        Tuple of (valid, error message or None)
    """
    if content_type != PDF_CONTENT_TYPE:
        return False, "File must be a PDF"
    if size_bytes > MAX_UPLOAD_BYTES:
        return False, "File size must be less than 10MB"
    return True, None


def format_file_size(size_bytes: int) -> str:
    if size_bytes < 1024:
        return f"{size_bytes} B"
    if size_bytes < 1024 * 1024:
        return f"{size_bytes / 1024:.1f} KB"
    return f"{size_bytes / (1024 * 1024):.1f} MB"
