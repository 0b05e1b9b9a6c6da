from __future__ import annotations

import threading
import time
from typing import Optional


class CanceledError(RuntimeError):
    pass


class CancelToken:
    """Cooperative cancellation flag shared between a walk and its caller."""

    def __init__(self, deadline: float | None = None) -> None:
        self._event = threading.Event()
        self._reason: Optional[Exception] = None
        self._deadline = deadline

    @classmethod
    def with_timeout(cls, seconds: float) -> "CancelToken":
        if seconds < 0:
            raise ValueError("timeout must be >= 0")
        return cls(deadline=time.monotonic() + seconds)

    def cancel(self, reason: Exception | str | None = None) -> None:
        if self._event.is_set():
            return
        if reason is None:
            reason = CanceledError("canceled")
        elif isinstance(reason, str):
            reason = CanceledError(reason)
        self._reason = reason
        self._event.set()

    def is_cancelled(self) -> bool:
        if self._event.is_set():
            return True
        if self._deadline is not None and time.monotonic() >= self._deadline:
            self.cancel("deadline exceeded")
            return True
        return False

    def wait(self, timeout: float | None = None) -> bool:
        if self._deadline is not None:
            remaining = max(0.0, self._deadline - time.monotonic())
            timeout = remaining if timeout is None else min(timeout, remaining)
        self._event.wait(timeout)
        return self.is_cancelled()

    @property
    def reason(self) -> Optional[Exception]:
        return self._reason
