"""Person-name heuristic over capitalized word runs.

Rules are evaluated in order and the first one that fires decides:

    EXCLUDED    any word is a place/function word  -> keep
    KNOWN_NAME  any word is a known first name     -> anonymize
    MULTI_WORD  run has 2 or 3 words               -> anonymize
    REJECTED    anything else (single plain word)  -> keep
"""

import unicodedata
from collections.abc import Callable
from enum import Enum

from pii_anonymizer.anonymization.patterns import EXCLUDED_WORDS, KNOWN_FIRST_NAMES


class NameDecision(Enum):
    EXCLUDED = "excluded"
    KNOWN_NAME = "known_name"
    MULTI_WORD = "multi_word"
    REJECTED = "rejected"

    @property
    def is_person(self) -> bool:
        return self in (NameDecision.KNOWN_NAME, NameDecision.MULTI_WORD)


def _has_excluded_word(words: list[str]) -> bool:
    return any(word in EXCLUDED_WORDS for word in words)


def _has_known_first_name(words: list[str]) -> bool:
    return any(word in KNOWN_FIRST_NAMES for word in words)


def _is_multi_word(words: list[str]) -> bool:
    return 2 <= len(words) <= 3


NAME_RULES: tuple[tuple[NameDecision, Callable[[list[str]], bool]], ...] = (
    (NameDecision.EXCLUDED, _has_excluded_word),
    (NameDecision.KNOWN_NAME, _has_known_first_name),
    (NameDecision.MULTI_WORD, _is_multi_word),
)


def classify_name(candidate: str) -> NameDecision:
    # Lexicons hold composed forms; the candidate may arrive decomposed.
    words = unicodedata.normalize("NFC", candidate).lower().split()
    for decision, rule in NAME_RULES:
        if rule(words):
            return decision
    return NameDecision.REJECTED


def is_person_name(candidate: str) -> bool:
    return classify_name(candidate).is_person
