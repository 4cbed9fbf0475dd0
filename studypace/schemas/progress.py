"""
Progress tracking schemas for StudyPace.

Defines Pydantic models for assignment progress including:
- Task kind and assignment status
- The progress update accepted by the progress-tracking endpoint
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime
from enum import Enum


class TaskKind(str, Enum):
    READING = "READING"
    HOMEWORK = "HOMEWORK"


class TaskStatus(str, Enum):
    NOT_STARTED = "NOT_STARTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class ProgressUpdate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    progress: int = Field(..., ge=0, le=100)
    status: TaskStatus
    started_at: Optional[datetime] = None
    completed_at: Optional[datetime] = None
