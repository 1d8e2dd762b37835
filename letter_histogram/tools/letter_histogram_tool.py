import argparse
import sys

from rich import print as rprint
from rich.markup import escape

from letter_histogram.histogram import Histogram
from letter_histogram.utils import (
    HistogramInputError,
    eprint,
    null_print,
    open_input,
)


def real_main(args) -> int:
    vprint = (lambda *a: rprint(*a, file=sys.stderr)) if args.verbose else null_print
    fold_case = not args.upper
    hist = Histogram()
    for name in args.files or ["-"]:
        try:
            f = open_input(name)
        except HistogramInputError as e:
            eprint(f"letter-histogram: {e}")
            return 1
        before = hist.total
        try:
            nchunks = hist.add_stream(f, fold_case=fold_case)
        finally:
            if f is not sys.stdin:
                f.close()
        vprint(
            f"[bold]{escape(name)}[/bold]: {nchunks} chunks, {hist.total - before} characters counted"
        )
    vprint(f"[bold]total[/bold]: {hist.total} characters, {len(hist.counts)} distinct")
    print(
        hist.render(
            threshold=args.threshold,
            blocks=args.blocks,
            width=args.width,
            color=args.color,
        )
    )
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="letter-histogram")
    parser.add_argument(
        "files", nargs="*", help="Input text files ('-' for stdin)", metavar="FILE"
    )
    parser.add_argument(
        "-t",
        "--threshold",
        type=float,
        default=0,
        help="Minimum percentage to display",
        metavar="PCT",
    )
    parser.add_argument(
        "-U", "--upper", help="Fold case to upper instead of lower", action="store_true"
    )
    parser.add_argument(
        "-b", "--blocks", help="Draw bars with Unicode block glyphs", action="store_true"
    )
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=80,
        help="Width of the longest block bar",
        metavar="WIDTH",
    )
    parser.add_argument("-c", "--color", help="Colorize bars", action="store_true")
    parser.add_argument(
        "-v", "--verbose", help="Print read statistics to stderr", action="store_true"
    )
    args = parser.parse_args()
    if args.width <= 0:
        parser.error("--width must be positive")
    return real_main(args)


if __name__ == "__main__":
    sys.exit(main())
