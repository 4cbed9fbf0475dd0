"""
StudyPace - Reading chunks, homework questions and time estimates for
grade-level school tasks.

Subpackages:
- schemas: Pydantic models for grades, breakdowns and progress
- engine: deterministic segmentation, detection, estimation and progress math
- generation: content generators (Gemini-backed and deterministic)
- utils: prompt templates, LLM JSON parsing, upload checks
"""

from .tasks import PreparedTask, prepare_task

__version__ = "0.1.0"

__all__ = [
    "PreparedTask",
    "prepare_task",
    "__version__",
]
