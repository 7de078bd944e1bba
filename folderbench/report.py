import sys
from typing import List, Optional, TextIO


class Reporter:
    """Human-readable report sink, one line per benchmark iteration."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.lines: List[str] = []
        self._owned = False

    @classmethod
    def to_file(cls, path: str) -> "Reporter":
        reporter = cls(open(path, "a", encoding="utf-8"))
        reporter._owned = True
        return reporter

    def log(self, msg: str) -> None:
        self.lines.append(msg)
        self.stream.write(msg + "\n")
        self.stream.flush()

    def close(self) -> None:
        if self._owned:
            self.stream.close()
            self._owned = False
