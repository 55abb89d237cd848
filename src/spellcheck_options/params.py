"""Solr spellcheck request parameter names.

The values are sent verbatim to the search engine and mirror
``org.apache.solr.common.params.SpellingParams``.
"""

from enum import Enum


class SpellingParams(str, Enum):
    """Request parameter keys understood by the Solr SpellCheckComponent."""

    BUILD = "spellcheck.build"
    COUNT = "spellcheck.count"
    DICTIONARY = "spellcheck.dictionary"
    ONLY_MORE_POPULAR = "spellcheck.onlyMorePopular"
    MAX_RESULTS_FOR_SUGGEST = "spellcheck.maxResultsForSuggest"
    ALTERNATIVE_TERM_COUNT = "spellcheck.alternativeTermCount"
    ACCURACY = "spellcheck.accuracy"

    # Collation
    COLLATE = "spellcheck.collate"
    MAX_COLLATIONS = "spellcheck.maxCollations"
    MAX_COLLATION_TRIES = "spellcheck.maxCollationTries"
    MAX_COLLATION_EVALUATIONS = "spellcheck.maxCollationEvaluations"
    COLLATE_EXTENDED_RESULTS = "spellcheck.collateExtendedResults"
    COLLATE_MAX_COLLECT_DOCS = "spellcheck.collateMaxCollectDocs"
    # Prefix for per-request overrides applied while testing collations.
    COLLATE_PARAM_OVERRIDE = "spellcheck.collateParam."

    def override(self, name: str) -> str:
        """Compose a namespaced key, e.g. ``spellcheck.collateParam.mm``."""
        return f"{self.value}{name}"
