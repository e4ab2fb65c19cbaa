"""Extraction of consecutive matching lines from a file."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, TextIO


@dataclass
class Lines:
    """Reads lines of ``file_name`` immediately before ``line_num``.

    A line is kept when ``condition`` holds for it and ``parser`` says to
    capture it. A ``line_num`` of -1 scans from the top of the file and stops
    at the first line the condition rejects.
    """

    condition: Callable[[str], bool]
    parser: Callable[[str], tuple[str, bool]]
    file_name: str = ""
    line_num: int = -1

    def extract(self) -> list[str]:
        """Extract the lines from ``file_name``."""
        with open(self.file_name, encoding="utf-8", newline="") as handle:
            return self.extract_from(handle)

    def extract_from(self, stream: TextIO) -> list[str]:
        """Extract the lines from an open text stream."""
        lines: list[str] = []
        lnum = 0
        while self.line_num == -1 or lnum < self.line_num - 1:
            line = stream.readline()
            at_end = line == ""
            if at_end:
                if lnum == 0:
                    raise ValueError("no lines in file")
                if lnum == 1:
                    raise ValueError("only 1 line")
                if self.line_num != -1:
                    raise ValueError(f"only {lnum} lines")

            if self.condition(line):
                extracted, capture = self.parser(line)
                if capture:
                    lines.append(extracted)
            elif self.line_num == -1:
                break
            else:
                lines = []

            if at_end:
                break
            lnum += 1
        return lines