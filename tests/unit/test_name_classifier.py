import pytest

from pii_anonymizer.anonymization.names import (
    NAME_RULES,
    NameDecision,
    classify_name,
    is_person_name,
)


class TestDecisionTable:
    def test_rule_order(self) -> None:
        assert [decision for decision, _ in NAME_RULES] == [
            NameDecision.EXCLUDED,
            NameDecision.KNOWN_NAME,
            NameDecision.MULTI_WORD,
        ]

    @pytest.mark.parametrize(
        ("decision", "is_person"),
        [
            (NameDecision.EXCLUDED, False),
            (NameDecision.KNOWN_NAME, True),
            (NameDecision.MULTI_WORD, True),
            (NameDecision.REJECTED, False),
        ],
    )
    def test_is_person(self, decision: NameDecision, is_person: bool) -> None:
        assert decision.is_person is is_person


class TestExcluded:
    @pytest.mark.parametrize("candidate", ["San Pedro Sula", "Honduras", "Costa Rica", "Tegucigalpa"])
    def test_places_are_excluded(self, candidate: str) -> None:
        assert classify_name(candidate) is NameDecision.EXCLUDED

    def test_exclusion_beats_known_first_name(self) -> None:
        # "juan" is a known first name, "san" is excluded.
        assert classify_name("San Juan") is NameDecision.EXCLUDED

    def test_word_in_both_lexicons_is_excluded(self) -> None:
        assert classify_name("Pedro") is NameDecision.EXCLUDED


class TestKnownName:
    def test_single_known_name(self) -> None:
        assert classify_name("Carlos") is NameDecision.KNOWN_NAME

    def test_known_name_with_surname(self) -> None:
        assert classify_name("Juan Pérez") is NameDecision.KNOWN_NAME

    def test_accented_known_name(self) -> None:
        assert classify_name("María") is NameDecision.KNOWN_NAME

    def test_decomposed_known_name(self) -> None:
        assert classify_name("Mari\u0301a") is NameDecision.KNOWN_NAME

    def test_known_name_in_long_run(self) -> None:
        assert classify_name("Laura Gómez Soto") is NameDecision.KNOWN_NAME


class TestMultiWord:
    def test_two_unknown_words(self) -> None:
        assert classify_name("Ernesto Zavala") is NameDecision.MULTI_WORD

    def test_three_unknown_words(self) -> None:
        assert classify_name("Ernesto Zavala Mejía") is NameDecision.MULTI_WORD

    def test_newline_separated_words(self) -> None:
        assert classify_name("Ernesto\nZavala") is NameDecision.MULTI_WORD


class TestRejected:
    @pytest.mark.parametrize("candidate", ["Hola", "Visita", "Reunión"])
    def test_single_ordinary_word(self, candidate: str) -> None:
        assert classify_name(candidate) is NameDecision.REJECTED
        assert is_person_name(candidate) is False
