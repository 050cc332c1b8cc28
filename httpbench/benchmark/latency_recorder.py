"""Thread-safe recording of latency samples and request outcomes."""
import threading
from typing import List, Tuple


class LatencyRecorder:
    """Append-only collection of latency samples in milliseconds."""

    def __init__(self):
        self._lock = threading.Lock()
        self._samples: List[float] = []

    def record(self, sample: float) -> None:
        """Append a latency sample. Safe to call from any worker thread."""
        with self._lock:
            self._samples.append(sample)

    def samples(self) -> List[float]:
        """Return a copy of the samples recorded so far."""
        with self._lock:
            return list(self._samples)

    def __len__(self) -> int:
        with self._lock:
            return len(self._samples)


class RequestCounters:
    """Attempt, success and failure counters shared by the workers."""

    def __init__(self):
        self._lock = threading.Lock()
        self._requests = 0
        self._successes = 0
        self._failures = 0

    def record_request(self) -> None:
        with self._lock:
            self._requests += 1

    def record_success(self) -> None:
        with self._lock:
            self._successes += 1

    def record_failure(self) -> None:
        with self._lock:
            self._failures += 1

    def snapshot(self) -> Tuple[int, int, int]:
        """Return (requests, successes, failures) read under a single lock."""
        with self._lock:
            return self._requests, self._successes, self._failures
