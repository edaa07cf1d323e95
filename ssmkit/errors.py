"""Exceptions raised for the error results of stream operations."""

from __future__ import annotations


class SSMError(Exception):
    """Base class for stream errors; ``code`` holds the numeric error result."""

    code: int | None = None
    default_message = "stream error"

    def __init__(self, message: str | None = None, *, code: int | None = None) -> None:
        if code is not None:
            self.code = code
        super().__init__(message if message is not None else self.default_message)


class FutureError(SSMError):
    """The requested time id is newer than anything written so far."""

    code = -1
    default_message = "requested data is newer than the latest entry"


class PastError(SSMError):
    """The requested time id has already dropped out of the history."""

    code = -2
    default_message = "requested data is older than the oldest entry"


class NoDataError(SSMError):
    """No data has been written to the stream yet."""

    code = -3
    default_message = "no data has been written yet"


_BY_CODE: dict[int, type[SSMError]] = {
    cls.code: cls for cls in (FutureError, PastError, NoDataError)  # type: ignore[misc]
}


def error_for_code(code: int) -> SSMError:
    """Return the exception matching a negative error result.

    Unknown negative codes give a plain :class:`SSMError` carrying the code.
    A non-negative code is a valid result, not an error, and raises ValueError.
    """
    code = int(code)
    if code >= 0:
        raise ValueError(f"{code} is not an error code")
    cls = _BY_CODE.get(code)
    if cls is None:
        return SSMError(f"stream error {code}", code=code)
    return cls()