"""Submission state tracking shared by proposal and job posting flows."""

import threading
from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterator, List, Optional, Set


class SubmissionState(str, Enum):
    """idle -> submitting -> (succeeded | failed) -> idle."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class SubmissionOutcome(str, Enum):
    """Why a submission ended the way it did."""

    SUCCEEDED = "succeeded"
    AUTH_REQUIRED = "auth_required"
    IN_PROGRESS = "in_progress"
    ALREADY_APPLIED = "already_applied"
    INVALID = "invalid"
    FAILED = "failed"


@dataclass
class SubmissionResult:
    """Terminal state of one submission plus anything the caller needs to re-render."""

    outcome: SubmissionOutcome
    message: Optional[str] = None
    record: Any = None
    jobs: Optional[List[Any]] = field(default=None)

    @property
    def state(self) -> SubmissionState:
        if self.outcome == SubmissionOutcome.SUCCEEDED:
            return SubmissionState.SUCCEEDED
        return SubmissionState.FAILED

    @property
    def ok(self) -> bool:
        return self.outcome == SubmissionOutcome.SUCCEEDED


class SubmissionTracker:
    """Thread-safe set of keys whose submission is in flight."""

    def __init__(self):
        self._lock = threading.Lock()
        self._in_flight: Set[Hashable] = set()

    def begin(self, key: Hashable) -> bool:
        """Mark key as submitting. False if it already was."""
        with self._lock:
            if key in self._in_flight:
                return False
            self._in_flight.add(key)
            return True

    def finish(self, key: Hashable) -> None:
        with self._lock:
            self._in_flight.discard(key)

    def state(self, key: Hashable) -> SubmissionState:
        with self._lock:
            return SubmissionState.SUBMITTING if key in self._in_flight else SubmissionState.IDLE

    def is_submitting(self, key: Hashable) -> bool:
        return self.state(key) == SubmissionState.SUBMITTING

    @contextmanager
    def submitting(self, key: Hashable) -> Iterator[bool]:
        """Hold the submitting mark for the duration of the block; yields False if already held."""
        acquired = self.begin(key)
        try:
            yield acquired
        finally:
            if acquired:
                self.finish(key)
