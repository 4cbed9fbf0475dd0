"""
Progress math for reading and homework tasks.

Provides:
- Percent complete for a reading cursor or a homework completed-count
- Remaining minutes from a position to the end of the sequence
- ReadingCursor: current and furthest-reached chunk
- Progress updates for the progress-tracking endpoint

All functions return 0 for empty sequences and never return negative values.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Sequence

from studypace.schemas import (
    HomeworkQuestion,
    ProgressUpdate,
    ReadingChunk,
    TaskStatus,
)


def _percent(part: float, total: int) -> int:
    if total <= 0:
        return 0
    # Half-up rounding, not round()'s half-to-even
    percent = math.floor(part / total * 100 + 0.5)
    return max(0, min(100, percent))


def reading_progress(current_index: int, total_chunks: int) -> int:
    """Percent complete with the chunk at `current_index` (0-based) read."""
    return _percent(max(current_index, -1) + 1, total_chunks)


def homework_progress(completed_count: int, total_count: int) -> int:
    return _percent(max(completed_count, 0), total_count)


def reading_time_remaining(current_index: int, chunks: Sequence[ReadingChunk]) -> int:
    """Minutes left, counting the chunk currently being read."""
    return sum(chunk.est_minutes for chunk in chunks[max(current_index, 0):])


def homework_time_remaining(completed_count: int, questions: Sequence[HomeworkQuestion]) -> int:
    """Minutes left, treating the first `completed_count` questions as done."""
    return sum(q.est_minutes for q in questions[max(completed_count, 0):])


def status_for_progress(progress: int) -> TaskStatus:
    if progress >= 100:
        return TaskStatus.COMPLETED
    if progress <= 0:
        return TaskStatus.NOT_STARTED
    return TaskStatus.IN_PROGRESS


@dataclass
class ReadingCursor:
    """
    Position within a chunk sequence.

    Students may go back to review; completion follows the furthest chunk
    reached, not the current one.
    """
    total_chunks: int
    current_index: int = 0
    furthest_index: int = 0

    def advance(self) -> bool:
        """Move to the next chunk. Returns False at the last chunk."""
        if self.current_index >= self.total_chunks - 1:
            return False
        self.current_index += 1
        self.furthest_index = max(self.furthest_index, self.current_index)
        return True

    def back(self) -> bool:
        """Move to the previous chunk. Returns False at the first chunk."""
        if self.current_index <= 0:
            return False
        self.current_index -= 1
        return True

    def jump(self, index: int):
        """Move to any chunk, clamped to the sequence."""
        if self.total_chunks <= 0:
            return
        self.current_index = max(0, min(index, self.total_chunks - 1))
        self.furthest_index = max(self.furthest_index, self.current_index)

    @property
    def progress(self) -> int:
        return reading_progress(self.furthest_index, self.total_chunks)

    def time_remaining(self, chunks: Sequence[ReadingChunk]) -> int:
        return reading_time_remaining(self.current_index, chunks)


def build_progress_update(
    progress: int,
    started_at: Optional[datetime] = None,
    now: Optional[datetime] = None,
) -> ProgressUpdate:
    """
    Progress update for an assignment.

    A start time is stamped on the first non-zero progress; a completion
    time when progress reaches 100.
    """
    now = now or datetime.now()
    status = status_for_progress(progress)
    if started_at is None and status is not TaskStatus.NOT_STARTED:
        started_at = now
    return ProgressUpdate(
        progress=max(0, min(100, progress)),
        status=status,
        started_at=started_at,
        completed_at=now if status is TaskStatus.COMPLETED else None,
    )
