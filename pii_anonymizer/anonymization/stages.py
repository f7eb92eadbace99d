"""Ordered detection passes.

Each pass rewrites the running text, so order matters: structured data
(emails, URLs, digit runs, addresses) is removed first and the name
heuristic sees only what is left.
"""

from collections.abc import Callable
from dataclasses import dataclass

from pii_anonymizer.anonymization import models, patterns
from pii_anonymizer.anonymization.mapping_store import MappingStore
from pii_anonymizer.anonymization.models import AnonymizationConfig
from pii_anonymizer.anonymization.names import is_person_name


@dataclass(frozen=True)
class DetectionStage:
    """One pass: which matcher to run, what to accept, how to tag it."""

    name: str
    entity_type: str
    pattern_name: str
    flag: str | None = None  # None -> always applied
    accepts: Callable[[str], bool] = patterns.accept_all

    def is_enabled(self, config: AnonymizationConfig) -> bool:
        return self.flag is None or config.is_enabled(self.flag)

    def apply(self, text: str, store: MappingStore) -> str:
        """Replace every accepted match in *text* with its token."""
        parts: list[str] = []
        cursor = 0
        for match in patterns.iter_matches(self.pattern_name, text):
            if not self.accepts(match.text):
                continue
            parts.append(text[cursor : match.span.start])
            parts.append(store.get_or_create(self.entity_type, match.text))
            cursor = match.span.end
        if not parts:
            return text
        parts.append(text[cursor:])
        return "".join(parts)


DETECTION_STAGES: tuple[DetectionStage, ...] = (
    DetectionStage("email", models.EMAIL, patterns.EMAIL, flag="emails"),
    DetectionStage("url", models.URL, patterns.URL),
    DetectionStage(
        "card_number",
        models.TARJETA,
        patterns.CARD_NUMBER,
        flag="cards",
        accepts=patterns.is_card_number,
    ),
    DetectionStage("national_id", models.ID, patterns.NATIONAL_ID, flag="ids"),
    DetectionStage(
        "phone",
        models.TELEFONO,
        patterns.PHONE,
        flag="phones",
        accepts=patterns.has_phone_digit_count,
    ),
    DetectionStage("address", models.DIRECCION, patterns.ADDRESS, flag="addresses"),
    DetectionStage(
        "name",
        models.PERSONA,
        patterns.NAME_CANDIDATE,
        flag="names",
        accepts=is_person_name,
    ),
)
