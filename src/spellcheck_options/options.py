"""
Immutable spellcheck request options.

``SpellcheckOptions`` collects the parameters targeting the Solr
SpellCheckComponent, which provides inline query suggestions based on
similar terms.  Every option method returns a *new* instance::

    options = (
        spellcheck(query)
        .dictionary("default")
        .count(5)
        .max_collations(3)
    )
    # -> spellcheck.dictionary=default, spellcheck.count=5,
    #    spellcheck.collate=true, spellcheck.maxCollations=3

Collation-related options switch ``spellcheck.collate`` on when it has
not been set yet.  The query execution layer reads ``query``,
``endpoint_name`` and ``parameters``; sending them to the server is not
handled here.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .parameters import ParameterSet, ParameterValue
from .params import SpellingParams

logger = logging.getLogger("spellcheck_options.options")

DEFAULT_ENDPOINT = "/spell"


class SpellcheckOptions(BaseModel):
    """
    Immutable set of spellcheck request parameters.

    Attributes:
        query: Query to spellcheck (opaque, may be ``None``).
        endpoint: Request handler ("qt") as given; may be blank.
            Read ``endpoint_name`` for the effective value.
        default_endpoint: Handler used when ``endpoint`` is blank.
        parameter_set: Accumulated request parameters.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    query: Any = None
    endpoint: str | None = None
    default_endpoint: str = DEFAULT_ENDPOINT
    parameter_set: ParameterSet = Field(default_factory=ParameterSet)

    @classmethod
    def create(
        cls,
        query: Any = None,
        *,
        default_endpoint: str = DEFAULT_ENDPOINT,
    ) -> SpellcheckOptions:
        """Create empty options, optionally bound to ``query``."""
        return cls(query=query, default_endpoint=default_endpoint)

    # -- read surface ----------------------------------------------------------

    @property
    def endpoint_name(self) -> str:
        """The request handler, falling back to ``default_endpoint``."""
        if self.endpoint and self.endpoint.strip():
            return self.endpoint
        return self.default_endpoint

    @property
    def parameters(self) -> Mapping[str, ParameterValue]:
        """Read-only, insertion-ordered view of the request parameters."""
        return self.parameter_set.snapshot()

    # -- general options -------------------------------------------------------

    def build_dictionary(self) -> SpellcheckOptions:
        """Have Solr build the dictionary used by the spellchecker."""
        return self._append(SpellingParams.BUILD, True)

    def count(self, nr: int) -> SpellcheckOptions:
        """Maximum number of suggestions to return."""
        return self._append(SpellingParams.COUNT, nr)

    def dictionary(self, name: str) -> SpellcheckOptions:
        """
        Use the dictionary (spellchecker) with the given name.

        Solr falls back to ``"default"`` when this is not sent.
        """
        return self._append(SpellingParams.DICTIONARY, name)

    def only_more_popular(self) -> SpellcheckOptions:
        """Only suggest terms more popular than the original query terms."""
        return self._append(SpellingParams.ONLY_MORE_POPULAR, True)

    def max_results_for_suggest(self, nr: int) -> SpellcheckOptions:
        """
        Maximum number of hits for which suggestions are still generated and
        ``correctlySpelled`` is reported as false.
        """
        return self._append(SpellingParams.MAX_RESULTS_FOR_SUGGEST, nr)

    def alternative_term_count(self, nr: int) -> SpellcheckOptions:
        """Number of suggestions for terms that exist in the index."""
        return self._append(SpellingParams.ALTERNATIVE_TERM_COUNT, nr)

    def accuracy(self, nr: float) -> SpellcheckOptions:
        """
        Accuracy used to decide whether a suggestion is worthwhile.

        Expected to lie between 0 and 1; the range is left to the server.
        """
        return self._append(SpellingParams.ACCURACY, float(nr))

    # -- collation -------------------------------------------------------------

    def collate(self) -> SpellcheckOptions:
        """
        Build a new query from the best suggestion for each term.

        Called implicitly by the other collation options.
        """
        return self._append(SpellingParams.COLLATE, True)

    def max_collations(self, nr: int) -> SpellcheckOptions:
        """Maximum number of collations to return."""
        return self._with_collate(SpellingParams.MAX_COLLATIONS)._append(
            SpellingParams.MAX_COLLATIONS, nr
        )

    def max_collation_tries(self, tries: int) -> SpellcheckOptions:
        """Number of collation candidates to test before giving up."""
        return self._with_collate(SpellingParams.MAX_COLLATION_TRIES)._append(
            SpellingParams.MAX_COLLATION_TRIES, tries
        )

    def max_collation_evaluations(self, evaluations: int) -> SpellcheckOptions:
        """
        Maximum number of word correction combinations to rank before
        choosing which collation candidates to test against the index.
        """
        return self._with_collate(SpellingParams.MAX_COLLATION_EVALUATIONS)._append(
            SpellingParams.MAX_COLLATION_EVALUATIONS, evaluations
        )

    def collate_extended_results(self) -> SpellcheckOptions:
        """Return the expanded collation response format."""
        return self._with_collate(SpellingParams.COLLATE_EXTENDED_RESULTS)._append(
            SpellingParams.COLLATE_EXTENDED_RESULTS, True
        )

    def collate_max_collect_docs(self, nr: int) -> SpellcheckOptions:
        """Maximum documents collected while testing a collation."""
        return self._with_collate(SpellingParams.COLLATE_MAX_COLLECT_DOCS)._append(
            SpellingParams.COLLATE_MAX_COLLECT_DOCS, nr
        )

    def collate_param(self, param: str, value: Any) -> SpellcheckOptions:
        """
        Override a query parameter while Solr validates collations.

        ``collate_param("mm", "100%")`` sends ``spellcheck.collateParam.mm``.
        """
        key = SpellingParams.COLLATE_PARAM_OVERRIDE.override(param)
        return self._with_collate(key)._append(key, value)

    # -- endpoint --------------------------------------------------------------

    def with_endpoint(self, qt: str | None) -> SpellcheckOptions:
        """Return a copy targeting request handler ``qt``."""
        return self.model_copy(update={"endpoint": qt})

    # -- internals -------------------------------------------------------------

    def _with_collate(self, requested_by: str) -> SpellcheckOptions:
        """Enable collation unless the flag is already present (any value)."""
        if self.parameter_set.contains(SpellingParams.COLLATE.value):
            return self
        logger.debug(
            "Enabling %s implicitly for %s",
            SpellingParams.COLLATE.value,
            _key(requested_by),
        )
        return self.collate()

    def _append(self, key: str, value: Any) -> SpellcheckOptions:
        return self.model_copy(
            update={"parameter_set": self.parameter_set.with_entry(_key(key), value)}
        )


def _key(key: str) -> str:
    """Plain string form of a parameter key."""
    if isinstance(key, SpellingParams):
        return key.value
    return key


def spellcheck(
    query: Any = None,
    *,
    default_endpoint: str = DEFAULT_ENDPOINT,
) -> SpellcheckOptions:
    """Shorthand for :meth:`SpellcheckOptions.create`."""
    return SpellcheckOptions.create(query, default_endpoint=default_endpoint)
