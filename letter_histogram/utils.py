import sys
from typing import Iterator, TextIO

from path import Path

CHUNK_SIZE = 64 * 1024

real_print = print
null_print = lambda *args, **kwargs: None
iprint = lambda *args, **kwargs: real_print(*args, file=sys.stderr, **kwargs)
eprint = iprint


class HistogramInputError(FileNotFoundError):
    pass


def read_chunks(f: TextIO, size: int = CHUNK_SIZE) -> Iterator[str]:
    assert size > 0
    while True:
        chunk = f.read(size)
        if not chunk:
            return
        yield chunk


def open_input(name: str) -> TextIO:
    if name == "-":
        # undecodable bytes become U+FFFD instead of aborting the run
        if hasattr(sys.stdin, "reconfigure"):
            sys.stdin.reconfigure(errors="replace")
        return sys.stdin
    p = Path(name)
    if not p.is_file():
        raise HistogramInputError(f"no such input file: '{name}'")
    return p.open(encoding="utf-8", errors="replace")
