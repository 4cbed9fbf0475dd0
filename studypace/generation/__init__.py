"""
StudyPace Generation - Content generators for task breakdowns.

This module provides:
- ContentGenerator: the generator interface
- RemoteModel: Gemini-backed generation
- DeterministicFallback: engine-backed generation
- ResilientGenerator: remote first, deterministic on failure
"""

from .base import ContentGenerator, GenerationError
from .fallback import DeterministicFallback
from .remote import RemoteModel
from .resilient import ResilientGenerator, create_generator

__all__ = [
    "ContentGenerator",
    "GenerationError",
    "DeterministicFallback",
    "RemoteModel",
    "ResilientGenerator",
    "create_generator",
]
