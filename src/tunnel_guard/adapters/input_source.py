from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from tunnel_guard.domain.messages import RawLine
from tunnel_guard.ports.input_source import InputSource


@dataclass(frozen=True, slots=True)
class FileInputSource(InputSource):
    # File is opened lazily and streamed line-by-line; nothing is buffered.
    path: Path
    encoding: str = "utf-8"
    # Undecodable bytes become U+FFFD so the line is dropped by the parser, not the run.
    decode_errors: str = "replace"

    def read(self) -> Iterable[RawLine]:
        with self.path.open("r", encoding=self.encoding, errors=self.decode_errors) as handle:
            yield from _lines(handle)


@dataclass(frozen=True, slots=True)
class TextStreamInputSource(InputSource):
    # Stream is owned by the caller (e.g. stdin) and is not closed here.
    stream: TextIO

    def read(self) -> Iterable[RawLine]:
        yield from _lines(self.stream)


def _lines(handle: Iterable[str]) -> Iterable[RawLine]:
    for idx, line in enumerate(handle, start=1):
        yield RawLine(line_no=idx, raw_text=line.rstrip("\r\n"))
