"""StudyPace utilities."""

from .prompt_loader import load_prompt, format_prompt, get_available_prompts
from .llm_json import extract_json_from_response
from .uploads import validate_pdf_upload, format_file_size, MAX_UPLOAD_BYTES

__all__ = [
    "load_prompt",
    "format_prompt",
    "get_available_prompts",
    "extract_json_from_response",
    "validate_pdf_upload",
    "format_file_size",
    "MAX_UPLOAD_BYTES",
]
