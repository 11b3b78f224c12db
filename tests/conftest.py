import sys
from pathlib import Path
from typing import Callable, Iterable, List

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from anagrammer.core import CombinationSearch, GroupIndex, SolutionExpander, profile_of


@pytest.fixture
def write_dictionary(tmp_path) -> Callable[[Iterable[str]], Path]:
    """Return a helper writing ``words`` one per line into a temporary file."""

    def _write(words: Iterable[str], name: str = "words.txt") -> Path:
        path = tmp_path / name
        path.write_text("".join(f"{word}\n" for word in words), encoding="utf-8")
        return path

    return _write


def run_anagrams(words: Iterable[str], phrase: str) -> List[str]:
    """Run the core engine directly, without the dictionary file or service."""

    target = profile_of(phrase)
    index = GroupIndex.build(words, target)
    results: List[str] = []
    expander = SolutionExpander(index, results.append)
    CombinationSearch(index, target, expander.expand).run()
    return results
