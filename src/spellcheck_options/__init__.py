"""Immutable builder for Solr spellcheck request options."""

from .options import DEFAULT_ENDPOINT, SpellcheckOptions, spellcheck
from .parameters import ParameterSet, ParameterValue
from .params import SpellingParams

__all__ = [
    # Options
    "SpellcheckOptions",
    "spellcheck",
    "DEFAULT_ENDPOINT",
    # Parameters
    "ParameterSet",
    "ParameterValue",
    "SpellingParams",
]
