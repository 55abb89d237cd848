"""Parameter names must match Solr's SpellingParams exactly."""

from __future__ import annotations

import pytest

from spellcheck_options import SpellingParams


@pytest.mark.parametrize(
    ("member", "expected"),
    [
        (SpellingParams.BUILD, "spellcheck.build"),
        (SpellingParams.COLLATE, "spellcheck.collate"),
        (SpellingParams.MAX_COLLATIONS, "spellcheck.maxCollations"),
        (SpellingParams.MAX_COLLATION_TRIES, "spellcheck.maxCollationTries"),
        (
            SpellingParams.MAX_COLLATION_EVALUATIONS,
            "spellcheck.maxCollationEvaluations",
        ),
        (
            SpellingParams.COLLATE_EXTENDED_RESULTS,
            "spellcheck.collateExtendedResults",
        ),
        (SpellingParams.COLLATE_MAX_COLLECT_DOCS, "spellcheck.collateMaxCollectDocs"),
        (SpellingParams.COLLATE_PARAM_OVERRIDE, "spellcheck.collateParam."),
        (SpellingParams.COUNT, "spellcheck.count"),
        (SpellingParams.DICTIONARY, "spellcheck.dictionary"),
        (SpellingParams.ONLY_MORE_POPULAR, "spellcheck.onlyMorePopular"),
        (SpellingParams.MAX_RESULTS_FOR_SUGGEST, "spellcheck.maxResultsForSuggest"),
        (SpellingParams.ALTERNATIVE_TERM_COUNT, "spellcheck.alternativeTermCount"),
        (SpellingParams.ACCURACY, "spellcheck.accuracy"),
    ],
)
def test_parameter_names(member: SpellingParams, expected: str):
    assert member.value == expected
    assert member == expected


def test_override_key_composition():
    assert (
        SpellingParams.COLLATE_PARAM_OVERRIDE.override("mm")
        == "spellcheck.collateParam.mm"
    )
