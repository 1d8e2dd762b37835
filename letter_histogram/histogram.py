from __future__ import annotations

import math
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, TextIO

from .default_mapping import DefaultMapping
from .term_colors import char_color, colorize, dim
from .utils import CHUNK_SIZE, read_chunks

# BOMs count as whitespace too
WHITESPACE_RE = re.compile(r"[\s\ufeff]")

# never rendered, even if they end up in counts directly
HIDDEN_CHARS = (" ", "\n")


def round_half_up(x: float, ndigits: int = 0) -> Decimal:
    return Decimal(x).quantize(Decimal(1).scaleb(-ndigits), rounding=ROUND_HALF_UP)


class Entry(NamedTuple):
    char: str
    percentage: float

    @property
    def bar_len(self) -> int:
        if not math.isfinite(self.percentage):
            return 0
        return int(round_half_up(self.percentage))

    @property
    def percentage_str(self) -> str:
        if not math.isfinite(self.percentage):
            return f"{self.percentage:.2f}"
        return f"{round_half_up(self.percentage, 2):.2f}"


class Histogram:
    """Letter frequency counter.

    Whitespace is dropped and case is folded before counting. `total` is the
    number of characters counted, so `sum(counts.values()) == total` holds
    after any sequence of `add` calls.
    """

    counts: DefaultMapping[str, int]
    total: int

    def __init__(self):
        self.counts = DefaultMapping(0)
        self.total = 0

    def add_stream(
        self, f: TextIO, fold_case: bool = False, size: int = CHUNK_SIZE
    ) -> int:
        nchunks = 0
        for chunk in read_chunks(f, size=size):
            self.add(chunk, fold_case=fold_case)
            nchunks += 1
        return nchunks

    def add(self, text: str, fold_case: bool = False):
        text = WHITESPACE_RE.sub("", text)
        text = text.lower() if fold_case else text.upper()
        for c in text:
            self.counts[c] += 1
            self.total += 1

    def percentage(self, count: int) -> float:
        if self.total == 0:
            return math.nan if count == 0 else math.inf
        return count / self.total * 100

    def entries(self, threshold: float = 0) -> list[Entry]:
        sorted_counts = sorted(self.counts.items(), key=lambda i: (-i[1], i[0]))
        entries = [Entry(c, self.percentage(n)) for c, n in sorted_counts]
        entries = [e for e in entries if e.char not in HIDDEN_CHARS]
        # nan compares false, so it is dropped here
        return [e for e in entries if e.percentage >= threshold]

    @staticmethod
    def block_str(fraction: float, width: int = 80) -> str:
        assert width > 0
        if not math.isfinite(fraction):
            return ""
        full_width = width * 8
        num_blk = int(fraction * full_width)
        full_blks = num_blk // 8
        partial_blks = num_blk % 8
        return "█" * full_blks + ("", "▏", "▎", "▍", "▌", "▋", "▊", "▉")[partial_blks]

    def render(
        self,
        threshold: float = 0,
        blocks: bool = False,
        width: int = 80,
        color: bool = False,
    ) -> str:
        entries = self.entries(threshold)
        max_pct = max((e.percentage for e in entries), default=0)
        lines = []
        for e in entries:
            if blocks:
                frac = e.percentage / max_pct if max_pct else 0
                bar = self.block_str(frac, width=width)
            else:
                bar = "#" * e.bar_len
            pct = f"{e.percentage_str}%"
            if color:
                bar = colorize(bar, char_color(e.char))
                pct = dim(pct)
            lines.append(f"{e.char}: {bar} {pct}")
        return "\n".join(lines)

    def __str__(self):
        return self.render()
