from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace

PERSONA = "PERSONA"
EMAIL = "EMAIL"
TELEFONO = "TELEFONO"
ID = "ID"
TARJETA = "TARJETA"
DIRECCION = "DIRECCION"
URL = "URL"
EMPRESA = "EMPRESA"
UBICACION = "UBICACION"

ENTITY_TYPES: tuple[str, ...] = (
    PERSONA,
    EMAIL,
    TELEFONO,
    ID,
    TARJETA,
    DIRECCION,
    URL,
    EMPRESA,
    UBICACION,
)

FLAG_PREFIX = "anonymize_"


@dataclass(frozen=True)
class AnonymizationConfig:
    """Per-request switches, one per entity class."""

    names: bool = True
    emails: bool = True
    phones: bool = True
    ids: bool = True
    cards: bool = True
    addresses: bool = True
    companies: bool = False
    locations: bool = False

    @classmethod
    def flag_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def is_enabled(self, flag: str) -> bool:
        return bool(getattr(self, flag))

    def with_overrides(self, overrides: Mapping[str, bool]) -> "AnonymizationConfig":
        """Return a copy with the given flags replaced.

        Keys may be bare (``names``) or carry the wire prefix (``anonymize_names``).
        """
        known = set(self.flag_names())
        changes = {}
        for key, value in overrides.items():
            flag = key.removeprefix(FLAG_PREFIX)
            if flag in known:
                changes[flag] = value
        return replace(self, **changes)


@dataclass(frozen=True)
class Span:
    """Character range [start, end) in the text a matcher was run over."""

    start: int
    end: int


@dataclass(frozen=True)
class EntityMapping:
    """Association between an original PII value and its placeholder."""

    original: str  # raw text of the first occurrence
    token: str  # e.g. "[PERSONA_1]"
    type: str  # one of ENTITY_TYPES
    position: Span | None = None


@dataclass(frozen=True)
class AnonymizationStats:
    entities_found: int = 0
    processing_time_ms: int = 0
    entity_breakdown: dict[str, int] = field(default_factory=dict)


@dataclass
class AnonymizationResult:
    """Output of one anonymize() call."""

    anonymized_text: str
    mappings: list[EntityMapping] = field(default_factory=list)
    stats: AnonymizationStats = field(default_factory=AnonymizationStats)


@dataclass(frozen=True)
class AnonymizationRequest:
    """Validated input at the request boundary."""

    text: str
    config: AnonymizationConfig = field(default_factory=AnonymizationConfig)
