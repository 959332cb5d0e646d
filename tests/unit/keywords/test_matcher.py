import pytest

from chunk_tagger.errors import ConfigurationError
from chunk_tagger.keywords.matcher import KeywordMatcher, find_matches
from chunk_tagger.models import KeywordPhrase, Token


def phrase(text: str) -> KeywordPhrase:
    return KeywordPhrase(terms=tuple(text.split()))


@pytest.fixture
def sentence() -> list[Token]:
    return [
        Token.of("The", "the", "O"),
        Token.of("big", "big", "B-NP"),
        Token.of("dog", "dog", "I-NP"),
        Token.of("ran", "run", "O"),
    ]


class TestKeywordMatcher:
    def test_single_term_match(self, sentence: list[Token]) -> None:
        matches = KeywordMatcher([phrase("dog")]).find_matches(sentence)

        assert [(m.start, m.end) for m in matches] == [(2, 3)]
        assert matches[0].keyword == phrase("dog")

    def test_multi_term_match(self, sentence: list[Token]) -> None:
        matches = KeywordMatcher([phrase("big dog")]).find_matches(sentence)

        assert [(m.start, m.end) for m in matches] == [(1, 3)]

    def test_compares_normalized_forms(self, sentence: list[Token]) -> None:
        """Surface form 'ran' is matched through its lemma 'run'."""
        matches = KeywordMatcher([phrase("run")]).find_matches(sentence)

        assert [(m.start, m.end) for m in matches] == [(3, 4)]

    def test_ignores_surface_form(self, sentence: list[Token]) -> None:
        assert KeywordMatcher([phrase("ran")]).find_matches(sentence) == []

    def test_reports_nested_matches(self, sentence: list[Token]) -> None:
        """Shorter matches inside longer ones are not suppressed."""
        matches = KeywordMatcher([phrase("big dog"), phrase("dog")]).find_matches(
            sentence
        )

        assert [(m.start, m.end) for m in matches] == [(1, 3), (2, 3)]

    def test_reports_overlapping_matches(self) -> None:
        tokens = [Token.of(w, w, "O") for w in ["a", "b", "c"]]
        matches = KeywordMatcher([phrase("a b"), phrase("b c")]).find_matches(tokens)

        assert [(m.start, m.end) for m in matches] == [(0, 2), (1, 3)]

    def test_same_start_follows_keyword_order(self, sentence: list[Token]) -> None:
        matches = KeywordMatcher(
            [phrase("big"), phrase("big dog run"), phrase("big dog")]
        ).find_matches(sentence)

        assert [m.keyword.text for m in matches] == ["big", "big dog run", "big dog"]

    def test_partial_phrase_does_not_match(self, sentence: list[Token]) -> None:
        assert KeywordMatcher([phrase("big cat")]).find_matches(sentence) == []

    def test_phrase_running_past_sentence_end(self, sentence: list[Token]) -> None:
        assert KeywordMatcher([phrase("run away")]).find_matches(sentence) == []

    def test_repeated_occurrences(self) -> None:
        tokens = [Token.of(w, w, "O") for w in ["dog", "and", "dog"]]
        matches = KeywordMatcher([phrase("dog")]).find_matches(tokens)

        assert [(m.start, m.end) for m in matches] == [(0, 1), (2, 3)]

    def test_empty_sentence(self) -> None:
        assert KeywordMatcher([phrase("dog")]).find_matches([]) == []

    def test_match_width_equals_term_count(self, sentence: list[Token]) -> None:
        matcher = KeywordMatcher([phrase("the big dog run"), phrase("dog")])

        for match in matcher.find_matches(sentence):
            assert match.end - match.start == len(match.keyword)


class TestKeywordMatcherValidation:
    def test_raises_on_empty_keywords(self) -> None:
        with pytest.raises(ConfigurationError, match="must not be empty"):
            KeywordMatcher([])

    def test_raises_on_phrase_without_terms(self) -> None:
        with pytest.raises(ConfigurationError, match="at least one term"):
            KeywordMatcher([KeywordPhrase(terms=())])


def test_find_matches_function(sentence: list[Token]) -> None:
    matches = find_matches(sentence, [phrase("dog")])

    assert [(m.start, m.end) for m in matches] == [(2, 3)]
