# tests/fakes.py

from __future__ import annotations

from collections.abc import Iterable


class FakeConsole:
    """
    Scripted stdin/stdout pair for console loop tests.

    - read() pops the next scripted line, then raises EOFError
    - write() captures everything printed
    """

    def __init__(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.out: list[str] = []

    def read(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str) -> None:
        self.out.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.out)
