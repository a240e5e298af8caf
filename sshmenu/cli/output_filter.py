"""Terminal stream wrapper that drops the BEL control character."""

from __future__ import annotations

from typing import Any

__all__ = ["BellFilter", "FilterWriteError"]

_BELL_TEXT = "\a"
_BELL_BYTES = b"\a"


class FilterWriteError(OSError):
    """Raised when the wrapped stream rejects a filtered write.

    ``characters_written`` reports how much the wrapped stream accepted
    before failing, mirroring :class:`BlockingIOError`.
    """

    def __init__(self, message: str, characters_written: int = 0) -> None:
        super().__init__(message)
        self.characters_written = characters_written


class BellFilter:
    """Forward writes to ``stream`` with every BEL removed.

    The selection widget rings the terminal bell on invalid keys. The filter
    reports the full original length as written so callers treat the data as
    consumed, even though fewer characters reached the terminal.

    There is intentionally no ``buffer`` attribute: prompt_toolkit writes
    straight to ``stream.buffer`` when it finds one, which would skip the
    filter.
    """

    def __init__(self, stream: Any) -> None:
        self._stream = stream

    @property
    def stream(self) -> Any:
        """Expose the wrapped stream."""

        return self._stream

    @property
    def encoding(self) -> str:
        return getattr(self._stream, "encoding", None) or "utf-8"

    def write(self, data: str | bytes) -> int:
        if not data:
            return 0
        if isinstance(data, bytes):
            filtered = data.replace(_BELL_BYTES, b"")
        else:
            filtered = data.replace(_BELL_TEXT, "")
        try:
            self._stream.write(filtered)
        except OSError as exc:
            written = getattr(exc, "characters_written", 0)
            raise FilterWriteError(str(exc), written) from exc
        return len(data)

    def flush(self) -> None:
        self._stream.flush()

    def fileno(self) -> int:
        return self._stream.fileno()

    def isatty(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty()) if isatty is not None else False

    def close(self) -> None:
        """Leave the wrapped terminal stream open."""
