#!/usr/bin/env python3
"""Command line entry point printing every multiword anagram of a phrase."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Optional, Sequence, TextIO

from anagrammer.app.app import AnagramApp
from anagrammer.utils.logging_config import configure_logging
from anagrammer.utils.observability import get_logger

__all__ = ["main", "read_phrase", "run"]

_logger = get_logger(__name__).bind(component="cli")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="anagrammer",
        description=(
            "Print every sentence of dictionary words whose letters are an "
            "exact rearrangement of the phrase."
        ),
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Phrase to rearrange. Read from stdin when omitted.",
    )
    parser.add_argument(
        "-d",
        "--dictionary",
        metavar="PATH",
        help=(
            "Word list with one word per line (defaults to $ANAGRAM_DICTIONARY, "
            "then words.txt, then /usr/share/dict/words)."
        ),
    )
    parser.add_argument(
        "--groups",
        action="store_true",
        help="List the letter groups usable for the phrase instead of sentences.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level for stderr diagnostics (overrides $ANAGRAM_LOG_LEVEL).",
    )
    return parser


def read_phrase(words: Sequence[str], stdin: TextIO) -> str:
    """Join ``words`` with spaces, or read the whole of ``stdin`` when empty."""

    if words:
        return " ".join(words)
    return stdin.read().rstrip()


def _prepare_output(stream: TextIO) -> None:
    # words read with surrogateescape must be written back byte for byte
    reconfigure = getattr(stream, "reconfigure", None)
    if callable(reconfigure):
        reconfigure(errors="surrogateescape")


def _silence_stdout() -> None:
    # point fd 1 at devnull so the flush at interpreter exit cannot fail again
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, sys.stdout.fileno())
    os.close(devnull)


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    try:
        phrase = read_phrase(args.words, stdin)
    except UnicodeDecodeError as exc:
        _logger.error("Phrase could not be decoded", context={"error": str(exc)})
        print(f"anagrammer: phrase is not valid text: {exc}", file=sys.stderr)
        return 1

    app = AnagramApp(dictionary_path=args.dictionary)
    _prepare_output(stdout)

    def emit(sentence: str) -> None:
        stdout.write(sentence)
        stdout.write("\n")

    try:
        if args.groups:
            listing = app.format_groups(phrase)
            if listing:
                emit(listing)
        else:
            app.generate(phrase, emit)
        stdout.flush()
    except BrokenPipeError:
        # reader went away (e.g. piped into ``head``)
        if stdout is sys.stdout:
            _silence_stdout()
        return 1
    except OSError as exc:
        print(f"anagrammer: {exc}", file=sys.stderr)
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
