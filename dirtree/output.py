"""Buffered text sink in front of stdout.

Rows are accumulated in memory and pushed to the wrapped stream in large
chunks. Stream failures surface as ``OutputWriteError``.
"""

from __future__ import annotations

from typing import TextIO

from .errors import OutputWriteError

BUFFER_SIZE = 4_096


def passthrough_undecodable(stream: TextIO) -> TextIO:
    """Let filename bytes that are not valid in the stream encoding reach it raw.

    ``os.scandir`` decodes such bytes to lone surrogates; ``surrogateescape``
    turns them back into the original bytes on write.
    """
    reconfigure = getattr(stream, "reconfigure", None)
    if reconfigure is not None:
        reconfigure(errors="surrogateescape")
    return stream


class BufferedOutput:
    """Accumulate text and write it through to ``stream`` in chunks."""

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        self.stream = stream
        self.buffer_size = max(1, buffer_size)
        self._pending: list[str] = []
        self._pending_len = 0

    @property
    def pending(self) -> str:
        """Text written but not yet pushed to the stream."""
        return "".join(self._pending)

    def write(self, text: str) -> None:
        self._pending.append(text)
        self._pending_len += len(text)
        if self._pending_len >= self.buffer_size:
            self._drain()

    def flush(self) -> None:
        """Push all pending text and flush the wrapped stream."""
        self._drain()
        try:
            self.stream.flush()
        except (OSError, ValueError) as exc:
            raise OutputWriteError(f"cannot flush output: {exc}") from exc

    def discard(self) -> None:
        """Drop pending text without writing it."""
        self._pending.clear()
        self._pending_len = 0

    def _drain(self) -> None:
        if not self._pending:
            return
        chunk = "".join(self._pending)
        self.discard()
        try:
            self.stream.write(chunk)
        except (OSError, ValueError) as exc:
            raise OutputWriteError(f"cannot write output: {exc}") from exc


__all__ = ["BUFFER_SIZE", "BufferedOutput", "passthrough_undecodable"]
