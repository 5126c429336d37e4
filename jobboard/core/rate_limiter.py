import threading
import time


class InMemoryRateLimiter:
    """
    Fixed-window counter per key (client ip + route bucket).
    State lives in this process only; keys whose window has ended are dropped.
    """

    def __init__(self, prune_interval_seconds: int = 60) -> None:
        self._lock = threading.Lock()
        # key -> (count, window_start, window_seconds)
        self._state: dict[str, tuple[int, float, int]] = {}
        self._prune_interval = prune_interval_seconds
        self._last_prune = time.time()

    def _prune(self, now: float) -> None:
        if now - self._last_prune < self._prune_interval:
            return
        expired = [k for k, (_, start, window) in self._state.items() if now - start >= window]
        for k in expired:
            del self._state[k]
        self._last_prune = now

    def allow(self, key: str, limit: int, window_seconds: int) -> tuple[bool, int]:
        """
        Returns (allowed, retry_after_seconds).
        """
        now = time.time()
        with self._lock:
            self._prune(now)
            count, window_start, _ = self._state.get(key, (0, now, window_seconds))
            if now - window_start >= window_seconds:
                count = 0
                window_start = now
            if count >= limit:
                retry_after = max(1, int(window_seconds - (now - window_start)))
                return False, retry_after
            self._state[key] = (count + 1, window_start, window_seconds)
            return True, 0

    def __len__(self) -> int:
        with self._lock:
            return len(self._state)

    def reset(self) -> None:
        with self._lock:
            self._state.clear()


rate_limiter = InMemoryRateLimiter()
