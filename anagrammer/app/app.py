"""Application wiring for the anagrammer project."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from anagrammer.core import DictionaryLoader, GroupIndex, SentenceSink
from anagrammer.utils.observability import get_logger

from anagrammer.app.services.anagram_service import AnagramService
from anagrammer.app.services.result_formatter import GroupListingFormatter


class AnagramApp:
    """High-level facade bundling the dictionary loader and search service."""

    def __init__(
        self,
        dictionary_path: Optional[Path | str] = None,
        *,
        loader: Optional[DictionaryLoader] = None,
        service: Optional[AnagramService] = None,
        formatter: Optional[GroupListingFormatter] = None,
    ) -> None:
        self.loader = loader or DictionaryLoader(dictionary_path)
        self.service = service or AnagramService(self.loader)
        if service is not None:
            self.service.set_loader(self.loader)
        self.formatter = formatter or GroupListingFormatter()

        self._logger = get_logger(__name__).bind(component="app_facade")
        self._logger.info(
            "Application dependencies wired",
            context={"dict_path": str(self.loader.dict_path)},
        )

    # Public API ------------------------------------------------------------
    def generate(self, phrase: str, emit: SentenceSink) -> int:
        return self.service.generate(phrase, emit)

    def find_anagrams(self, phrase: str) -> List[str]:
        return self.service.find_anagrams(phrase)

    def list_groups(self, phrase: str) -> GroupIndex:
        return self.service.build_index(phrase)

    def format_groups(self, phrase: str) -> str:
        return self.formatter.format_index(self.list_groups(phrase))


__all__ = ["AnagramApp"]
