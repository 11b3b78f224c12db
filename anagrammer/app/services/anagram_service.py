"""Service orchestrating dictionary grouping, search and sentence emission."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

from anagrammer.core import (
    CombinationSearch,
    DictionaryLoader,
    GroupIndex,
    LetterProfile,
    SentenceSink,
    SolutionExpander,
    profile_of,
    profile_weight,
)

from ...utils.observability import (
    add_span_attributes,
    create_counter,
    create_histogram,
    get_logger,
    record_exception,
    start_span,
)
from ...utils.telemetry import StructuredTelemetry


class AnagramService:
    """Runs multiword anagram searches against one dictionary."""

    def __init__(
        self,
        loader: DictionaryLoader,
        *,
        telemetry: Optional[StructuredTelemetry] = None,
    ) -> None:
        self.loader = loader
        self.telemetry = telemetry or StructuredTelemetry()
        self._logger = get_logger(__name__).bind(
            component="anagram_service",
            dict_path=str(loader.dict_path),
        )

        self._metric_request_total = create_counter(
            "anagram_search_requests_total",
            "Total anagram searches started.",
        )
        self._metric_request_failures = create_counter(
            "anagram_search_request_failures_total",
            "Total anagram searches that raised an exception.",
        )
        self._metric_sentences = create_counter(
            "anagram_sentences_emitted_total",
            "Sentences emitted across all anagram searches.",
        )
        self._metric_request_duration = create_histogram(
            "anagram_search_request_seconds",
            "Latency of complete anagram searches.",
        )

    def set_loader(self, loader: DictionaryLoader) -> None:
        self.loader = loader
        self._logger = self._logger.bind(dict_path=str(loader.dict_path))

    @staticmethod
    def target_for(phrase: str) -> Tuple[LetterProfile, int]:
        """Return the letter profile and weight of ``phrase``."""

        target = profile_of(phrase or "")
        return target, profile_weight(target)

    def build_index(self, phrase: str) -> GroupIndex:
        target, _ = self.target_for(phrase)
        return self.loader.build_index(target)

    def generate(self, phrase: str, emit: SentenceSink) -> int:
        """Emit every anagram sentence of ``phrase`` and return how many were found.

        Sentences are passed to ``emit`` as soon as they are produced; nothing
        is accumulated, so arbitrarily large result sets stream through.
        """

        target, weight = self.target_for(phrase)
        self._metric_request_total.inc()
        self.telemetry.start_trace("anagram_search")
        self.telemetry.annotate("target.weight", weight)
        self._logger.info(
            "Anagram search started",
            context={"phrase": phrase, "weight": weight},
        )

        with start_span("anagram.search", {"target.weight": weight}) as span:
            try:
                with self._metric_request_duration.time():
                    with self.telemetry.timer("index_build"):
                        index = self.loader.build_index(target)
                    self.telemetry.annotate("index.groups", len(index))
                    self.telemetry.annotate("index.words", index.word_count)

                    expander = SolutionExpander(index, emit)
                    search = CombinationSearch(index, target, expander.expand)
                    with self.telemetry.timer("search"):
                        solutions = search.run()
            except Exception as exc:
                self._metric_request_failures.inc()
                record_exception(span, exc)
                self._logger.error(
                    "Anagram search failed",
                    context={"phrase": phrase, "error": str(exc)},
                )
                raise

            sentences = expander.sentences_emitted
            add_span_attributes(
                span,
                {
                    "index.groups": len(index),
                    "search.solutions": solutions,
                    "search.sentences": sentences,
                },
            )

        self._metric_sentences.inc(sentences)
        self.telemetry.increment("search.solutions", solutions)
        self.telemetry.increment("search.sentences", sentences)
        self._logger.info(
            "Anagram search finished",
            context={
                "groups": len(index),
                "solutions": solutions,
                "sentences": sentences,
            },
        )
        return sentences

    def find_anagrams(self, phrase: str) -> List[str]:
        """Collect every sentence for ``phrase`` into a list."""

        results: List[str] = []
        self.generate(phrase, results.append)
        return results

    def get_latest_telemetry(self) -> Dict[str, Any]:
        return self.telemetry.snapshot()


__all__ = ["AnagramService"]
