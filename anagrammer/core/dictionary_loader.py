"""Streaming reader for line-delimited word lists."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterator, List, Optional

from ..utils.observability import get_logger
from .letter_profile import LetterProfile
from .word_groups import GroupIndex

DICTIONARY_ENV_VAR = "ANAGRAM_DICTIONARY"


def _default_candidates() -> List[Path]:
    module_path = Path(__file__).resolve()
    return [
        module_path.parents[1] / "words.txt",
        module_path.parents[2] / "words.txt",
        Path.home() / ".local" / "bin" / "words.txt",
        Path("/usr/share/dict/words"),
    ]


def _strip_terminator(line: str) -> str:
    """Drop one trailing ``\\n`` and then at most one ``\\r``; a lone ``\\r`` stays."""

    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class DictionaryLoader:
    """Reads one word per line from a dictionary file."""

    def __init__(self, dict_path: Optional[Path | str] = None) -> None:
        if dict_path is None:
            dict_path = os.environ.get(DICTIONARY_ENV_VAR) or None

        if dict_path is not None:
            base_path = Path(dict_path).expanduser()
        else:
            candidates = _default_candidates()
            base_path = candidates[0]
            for candidate in candidates:
                try:
                    if candidate.exists():
                        base_path = candidate
                        break
                except OSError:
                    continue
        self.dict_path: Path = base_path
        self._logger = get_logger(__name__).bind(
            component="dictionary_loader",
            dict_path=str(self.dict_path),
        )

    def iter_words(self) -> Iterator[str]:
        """Yield each non-empty ``\\n``-terminated line without its terminator.

        Undecodable bytes are carried through as surrogate escapes so words are
        reproduced exactly on output. A missing file raises ``OSError``.
        """

        with self.dict_path.open(
            "r", encoding="utf-8", errors="surrogateescape", newline="\n"
        ) as handle:
            for line in handle:
                word = _strip_terminator(line)
                if not word:
                    continue
                yield word

    def build_index(self, target: LetterProfile) -> GroupIndex:
        """Group the dictionary words able to appear in an anagram of ``target``."""

        try:
            index = GroupIndex.build(self.iter_words(), target)
        except OSError as exc:
            self._logger.error(
                "Dictionary could not be read",
                context={"error": str(exc)},
            )
            raise

        self._logger.info(
            "Dictionary grouped",
            context={"groups": len(index), "words": index.word_count},
        )
        return index


__all__ = ["DICTIONARY_ENV_VAR", "DictionaryLoader"]
