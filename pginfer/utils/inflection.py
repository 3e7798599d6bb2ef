# pginfer/utils/inflection.py
"""English inflection helpers for PostGraphile-style identifiers.

Only the last CamelCase word of an identifier is inflected, so compound
type names keep their prefix untouched:

    pluralize("NodeTypeRegistry")    -> "NodeTypeRegistries"
    singularize("NodeTypeRegistries") -> "NodeTypeRegistry"
    singularize("People")             -> "Person"
"""

import re
from typing import Tuple

import inflect

_engine = inflect.engine()

# PostGraphile keeps the Latin plural for these (SchemataOrderBy, ...)
_LATIN_PLURALS = {
    "schema": "schemata",
}
for _singular, _plural in _LATIN_PLURALS.items():
    _engine.defnoun(_singular, _plural)

_LAST_WORD_RE = re.compile(r"^(.*?)([A-Z]+[a-z0-9]*|[a-z0-9]+)$")

# Singular nouns that singular_noun would otherwise trim (address, status, analysis)
_SINGULAR_ENDINGS = ("ss", "us", "is")


def _split_last_word(word: str) -> Tuple[str, str]:
    match = _LAST_WORD_RE.match(word)
    if not match:
        return "", word
    return match.group(1), match.group(2)


def _match_case(original: str, inflected: str) -> str:
    if not inflected:
        return inflected
    if original[:1].isupper():
        return inflected[0].upper() + inflected[1:]
    return inflected[0].lower() + inflected[1:]


def pluralize(word: str) -> str:
    """Pluralize the last word of an identifier (``Person`` -> ``People``)."""
    if not word:
        return word
    prefix, last = _split_last_word(word)
    # inflect leaves capitalized words alone as proper nouns
    plural = _engine.plural_noun(last.lower())
    if not plural:
        return word
    return prefix + _match_case(last, plural)


def _is_singular(word: str) -> bool:
    if word.endswith(_SINGULAR_ENDINGS):
        return True
    candidate = _engine.singular_noun(word)
    if not candidate:
        return True
    return _engine.plural_noun(candidate) != word and candidate + "s" != word


def singularize(word: str) -> str:
    """Singularize the last word of an identifier.

    Words that are already singular (``Address``, ``Status``) are returned
    unchanged.
    """
    if not word:
        return word
    prefix, last = _split_last_word(word)
    lowered = last.lower()
    if _is_singular(lowered):
        return word
    return prefix + _match_case(last, _engine.singular_noun(lowered))


def lower_camel(word: str) -> str:
    """Lower-case the first character (``UserProfile`` -> ``userProfile``)."""
    return word[:1].lower() + word[1:]


def upper_camel(word: str) -> str:
    """Upper-case the first character (``products`` -> ``Products``)."""
    return word[:1].upper() + word[1:]
