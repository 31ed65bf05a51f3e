"""
Request epoch: a monotonic token for discarding stale async results.
"""


class RequestEpoch:
    """
    Monotonic per-session counter.
    
    Every async request captures the value at dispatch time; its result is
    applied only if the value is still current when the request resolves.
    """

    def __init__(self, start: int = 0):
        self._value = start

    @property
    def current(self) -> int:
        return self._value

    def advance(self) -> int:
        """Start a new epoch and return it."""
        self._value += 1
        return self._value

    def is_current(self, epoch: int) -> bool:
        return epoch == self._value

    def __repr__(self) -> str:
        return f"RequestEpoch(current={self._value})"
