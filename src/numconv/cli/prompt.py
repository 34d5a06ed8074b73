"""Whitespace-token input for the numbered shell.

:class:`TokenReader` reads like a C++ ``std::cin >> token`` loop: each
call returns the next whitespace-delimited token, and any extra tokens
typed on the same line are kept for the following prompts.
"""

from __future__ import annotations

import sys
from collections import deque
from typing import TextIO


class TokenReader:
    """Prompted token reader over a text stream.

    Parameters
    ----------
    stream:
        Source of input lines.  ``None`` means ``sys.stdin``, looked up on
        every read so test harnesses that swap ``sys.stdin`` are honoured.
    prompt_stream:
        Where prompts are written.  ``None`` means ``sys.stdout``.
    """

    def __init__(
        self,
        stream: TextIO | None = None,
        prompt_stream: TextIO | None = None,
    ) -> None:
        self._stream = stream
        self._prompt_stream = prompt_stream
        self._pending: deque[str] = deque()

    def read_token(self, prompt: str = "") -> str | None:
        """Write *prompt* and return the next token, or ``None`` at EOF."""
        if prompt:
            out = self._prompt_stream or sys.stdout
            out.write(prompt)
            out.flush()

        while not self._pending:
            line = (self._stream or sys.stdin).readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()
