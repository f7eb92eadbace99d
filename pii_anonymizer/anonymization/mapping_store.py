import unicodedata
from collections import Counter

from pii_anonymizer.anonymization.models import EntityMapping


class MappingStore:
    """Request-scoped table of entity -> placeholder assignments.

    Created fresh for each anonymize() call and discarded afterwards. The
    same (type, original) pair always yields the same token, comparing
    originals case-insensitively and regardless of Unicode composition.
    Per-type counters start at 1 and never repeat.
    """

    def __init__(self) -> None:
        self._entries: dict[tuple[str, str], EntityMapping] = {}
        self._counters: Counter[str] = Counter()

    def __len__(self) -> int:
        return len(self._entries)

    def get_or_create(self, entity_type: str, original: str) -> str:
        """Return the token for *original*, allocating the next one if unseen."""
        key = (entity_type, unicodedata.normalize("NFC", original).lower())
        existing = self._entries.get(key)
        if existing is not None:
            return existing.token

        self._counters[entity_type] += 1
        token = f"[{entity_type}_{self._counters[entity_type]}]"
        self._entries[key] = EntityMapping(
            original=original,
            token=token,
            type=entity_type,
        )
        return token

    def mappings(self) -> list[EntityMapping]:
        """All mappings in creation order."""
        return list(self._entries.values())

    def count_by_type(self) -> dict[str, int]:
        breakdown: dict[str, int] = {}
        for mapping in self._entries.values():
            breakdown[mapping.type] = breakdown.get(mapping.type, 0) + 1
        return breakdown
