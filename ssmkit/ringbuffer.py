"""Ring buffer of stream entries indexed by time id, with timestamps."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from .constants import SSM_TID_SP
from .errors import FutureError, NoDataError, PastError

T = TypeVar("T")

DEFAULT_SIZE = 16


class RingBuffer(Generic[T]):
    """Fixed-size history of values and timestamps addressed by time id.

    The newest time id is ``top``; the oldest readable one is ``bottom``,
    which keeps one slot of margin for an entry that is being written.
    """

    def __init__(self, buffer_size: int = DEFAULT_SIZE) -> None:
        self._data: list[Any] = []
        self._times: list[float] = []
        self._size = 0
        self._top = -1
        self.resize(buffer_size)

    @property
    def size(self) -> int:
        """Number of slots; 0 once the buffer has been reset."""
        return self._size

    @property
    def top(self) -> int:
        """Newest time id written, or -1 when nothing has been written."""
        return self._top

    @property
    def bottom(self) -> int:
        """Oldest time id that may be read, or the top when it is negative."""
        if self._top < 0:
            return self._top
        return max(self._top - self._size + 2, 0)

    def reset(self) -> None:
        """Deallocate the buffer; it must be resized before further use."""
        self._size = 0
        self._top = 0

    def resize(self, buffer_size: int) -> None:
        """Set the number of slots and restart counting time ids.

        Stored values in slots that remain are kept.
        """
        buffer_size = int(buffer_size)
        if buffer_size <= 0:
            raise ValueError("buffer size must be greater than 0")
        self._size = buffer_size
        self._top = -1
        self._data = (self._data + [None] * buffer_size)[:buffer_size]
        self._times = (self._times + [0.0] * buffer_size)[:buffer_size]

    def _require_allocated(self) -> None:
        if self._size <= 0:
            raise RuntimeError("ring buffer is not allocated")

    def write_time(self, tid: int, time: float) -> None:
        """Store the timestamp of a time id without touching its value."""
        self._require_allocated()
        self._times[tid % self._size] = float(time)

    def write(self, data: T, tid: int | None = None, time: float | None = None) -> int:
        """Store a value, by default as the entry after the top one.

        Writing at an explicit time id makes it the new top. When ``time``
        is given, the timestamp is stored as well. Returns the time id used.
        """
        self._require_allocated()
        if tid is None:
            tid = self._top + 1
        if time is not None:
            self.write_time(tid, time)
        self._data[tid % self._size] = data
        self._top = tid
        return tid

    def read_time(self, tid: int) -> float:
        """Return the timestamp stored in the slot of a time id."""
        self._require_allocated()
        return self._times[tid % self._size]

    def tid_at(self, time: float) -> int:
        """Return the newest time id whose timestamp is not later than ``time``."""
        self._require_allocated()
        top = self._top
        if top < SSM_TID_SP:
            raise NoDataError()
        top_time = self.read_time(top)
        if time > top_time:
            raise FutureError()
        bottom = self.bottom
        if time < self.read_time(bottom):
            raise PastError()

        cycle = top_time - self.read_time(top - 1)
        tid = top + int((time - top_time) / cycle) if cycle > 0 else top
        tid = min(max(tid, bottom), top)

        itime = self.read_time(tid)
        while (itime < 0 or itime < time) and tid < top:
            tid += 1
            itime = self.read_time(tid)
        while (itime < 0 or itime > time) and tid > bottom:
            tid -= 1
            itime = self.read_time(tid)
        return tid

    def read(self, tid: int = -1) -> tuple[T, int, float]:
        """Return ``(value, tid, time)`` for a time id; a negative id means the newest."""
        self._require_allocated()
        if tid < 0:
            tid = self._top
        if tid < SSM_TID_SP:
            raise NoDataError()
        if tid > self._top:
            raise FutureError()
        if tid < self.bottom:
            raise PastError()
        time = self.read_time(tid)
        if time < 0:
            raise NoDataError()
        return self._data[tid % self._size], tid, time