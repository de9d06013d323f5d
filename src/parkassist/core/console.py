"""Whitespace-separated operator input, shared by every prompt of a run."""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional, TextIO


class InputTokens:
    """
    Hands out one token at a time from a text stream.

    Lines are only read when the tokens already buffered run out, and blank
    lines are skipped, so ``1 30`` answers the mode prompt and the first
    distance prompt in one go. :meth:`discard_line` drops whatever is left of
    the current line after a bad token.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._pending: Deque[str] = deque()

    def next_token(self) -> Optional[str]:
        """Return the next token, or ``None`` at end of input."""
        while not self._pending:
            line = self._stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        self._pending.clear()
