"""Shared, read-only pattern registry and lexicons.

Everything here is compiled once at import time and never mutated, so any
number of concurrent anonymization requests can use it without locking.
Matchers are looked up by name through ``iter_matches``; a pattern that
defines a ``value`` group reports only that group (the keyword in front of
it is context, not PII).
"""

import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from pii_anonymizer.anonymization.models import Span

EMAIL = "email"
URL = "url"
CARD_NUMBER = "card_number"
CARD_CVV = "card_cvv"
CARD_EXPIRY = "card_expiry"
NATIONAL_ID = "national_id"
PHONE = "phone"
ADDRESS = "address"
NAME_CANDIDATE = "name_candidate"

_VALUE_GROUP = "value"

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+\-]+@[A-Za-z0-9.\-]+\.[A-Za-z]{2,}\b")

_URL_RE = re.compile(r"https?://[^\s]+|www\.[^\s]+")

# 3 groups of 4 digits + 1-7 trailing digits (13-19 digit cards).
_CARD_NUMBER_RE = re.compile(r"\b(?:\d{4}[\s\-]?){3}\d{1,7}\b")

_CARD_CVV_RE = re.compile(
    r"(?:cvv|cvc|security\s+code"
    r"|c[oó]digo?\s+(?:de\s+)?seguridad"
    r"|clave\s+(?:de\s+)?seguridad)"
    r"[\s:]*(?P<value>\d{3,4})\b",
    re.IGNORECASE,
)

_CARD_EXPIRY_RE = re.compile(
    r"(?:vencimiento|venc|expiration|expiry|expira|expires|exp"
    r"|v[aá]lid[ao]?\s+hasta|valid\s+(?:thru|until))"
    r"[\s:]*(?P<value>\d{1,2}[\s/\-]\d{2,4})",
    re.IGNORECASE,
)

# Honduran DNI: 0801-1990-12345
_NATIONAL_ID_RE = re.compile(r"\b\d{4}[\s\-]?\d{4}[\s\-]?\d{5}\b")

# Honduran numbers (optional +504 prefix, 2/3/8/9 leading digit) first,
# then a generic international fallback.
_PHONE_RE = re.compile(
    r"(?:(?:\+504|504)[\s\-]?)?[2389]\d{3}[\s\-]?\d{4}"
    r"|\+?\d{1,4}?[\s\-]?\(?\d{1,4}\)?[\s\-]?\d{1,4}[\s\-]?\d{1,9}"
)

_ADDRESS_RE = re.compile(
    r"\b(?:calle|avenida|av\.|boulevard|blvd|colonia|col\.|barrio|zona|residencial)"
    r"\s+[A-Za-zÀ-ÿ0-9\s,#\-]+(?:\d+|s/n)",
    re.IGNORECASE,
)

# 1-3 consecutive capitalized words, accented letters included in either
# composed or decomposed (base letter + combining mark) form.
_NAME_WORD = r"[A-ZÁÉÍÓÚÑÜ][\u0300-\u036f]?[a-záéíóúñü\u0300-\u036f]+"
_NAME_CANDIDATE_RE = re.compile(
    rf"\b{_NAME_WORD}(?:\s+{_NAME_WORD}){{0,2}}(?!\w)"
)

PATTERNS: Mapping[str, re.Pattern[str]] = MappingProxyType(
    {
        EMAIL: _EMAIL_RE,
        URL: _URL_RE,
        CARD_NUMBER: _CARD_NUMBER_RE,
        CARD_CVV: _CARD_CVV_RE,
        CARD_EXPIRY: _CARD_EXPIRY_RE,
        NATIONAL_ID: _NATIONAL_ID_RE,
        PHONE: _PHONE_RE,
        ADDRESS: _ADDRESS_RE,
        NAME_CANDIDATE: _NAME_CANDIDATE_RE,
    }
)

KNOWN_FIRST_NAMES: frozenset[str] = frozenset(
    {
        "juan", "maría", "josé", "carlos", "ana", "luis", "pedro", "antonio",
        "francisco", "jesús", "javier", "manuel", "fernando", "diego", "daniel",
        "alejandro", "rafael", "miguel", "ángel", "jorge", "alberto", "roberto",
        "laura", "carmen", "isabel", "rosa", "teresa", "patricia", "marta",
        "sofía", "elena", "cristina", "paula", "beatriz", "raquel", "silvia",
    }
)

# Capitalized words that are places or function words, never names.
EXCLUDED_WORDS: frozenset[str] = frozenset(
    {
        "san", "santa", "santo", "buenos", "aires", "salvador", "pedro", "sula",
        "la", "el", "los", "las", "de", "del", "tegucigalpa", "comayagua",
        "costa", "rica", "guatemala", "nicaragua", "honduras",
    }
)

_SEPARATORS_RE = re.compile(r"[\s\-]")
_ASCII_DIGITS_RE = re.compile(r"[0-9]+")
_CARD_SHAPE_RE = re.compile(r"[0-9][0-9\s\-]+[0-9]")

MIN_PHONE_DIGITS = 8


@dataclass(frozen=True)
class PatternMatch:
    text: str
    span: Span


def iter_matches(pattern_name: str, text: str) -> Iterator[PatternMatch]:
    """Yield non-overlapping matches of the named pattern, left to right.

    Raises:
        KeyError: if no pattern is registered under *pattern_name*.
    """
    pattern = PATTERNS[pattern_name]
    has_value_group = _VALUE_GROUP in pattern.groupindex
    for m in pattern.finditer(text):
        group = _VALUE_GROUP if has_value_group else 0
        yield PatternMatch(text=m.group(group), span=Span(m.start(group), m.end(group)))


def is_card_number(candidate: str) -> bool:
    """True when *candidate* is only digits and space/hyphen separators."""
    if not _CARD_SHAPE_RE.fullmatch(candidate):
        return False
    return _ASCII_DIGITS_RE.fullmatch(_SEPARATORS_RE.sub("", candidate)) is not None


def has_phone_digit_count(candidate: str) -> bool:
    """Reject short digit runs such as partial dates."""
    return sum(ch in "0123456789" for ch in candidate) >= MIN_PHONE_DIGITS


def accept_all(candidate: str) -> bool:
    return True
