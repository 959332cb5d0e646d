import pytest

from chunk_tagger.chunks.labels import ChunkLabel, continues_run, parse_label
from chunk_tagger.models import Token


def tokens(*labels: str) -> list[Token]:
    return [Token.of(f"w{i}", f"w{i}", label) for i, label in enumerate(labels)]


class TestParseLabel:
    @pytest.mark.parametrize(
        "label, expected",
        [
            ("B-NP", ChunkLabel(prefix="B", chunk_type="NP")),
            ("I-NP", ChunkLabel(prefix="I", chunk_type="NP")),
            ("i-np", ChunkLabel(prefix="I", chunk_type="NP")),
            ("E-VP", ChunkLabel(prefix="E", chunk_type="VP")),
            ("S-PP", ChunkLabel(prefix="S", chunk_type="PP")),
        ],
    )
    def test_chunk_labels(self, label: str, expected: ChunkLabel) -> None:
        assert parse_label(label) == expected

    @pytest.mark.parametrize("label", ["O", "", "NP", "X-NP", "B-", "-NP"])
    def test_outside_or_unrecognized(self, label: str) -> None:
        assert parse_label(label) is None


class TestContinuesRun:
    def test_inside_after_begin(self) -> None:
        assert continues_run(tokens("B-NP", "I-NP"), 1)

    def test_inside_after_inside(self) -> None:
        assert continues_run(tokens("B-NP", "I-NP", "I-NP"), 2)

    def test_begin_never_continues(self) -> None:
        assert not continues_run(tokens("B-NP", "B-NP"), 1)

    def test_type_change_breaks_run(self) -> None:
        assert not continues_run(tokens("B-VP", "I-NP"), 1)

    def test_orphan_inside_after_outside(self) -> None:
        assert not continues_run(tokens("O", "I-NP"), 1)

    def test_end_closes_run(self) -> None:
        sentence = tokens("B-NP", "E-NP", "I-NP")

        assert continues_run(sentence, 1)
        assert not continues_run(sentence, 2)

    def test_single_stands_alone(self) -> None:
        assert not continues_run(tokens("B-NP", "S-NP"), 1)

    def test_bounds(self) -> None:
        sentence = tokens("B-NP", "I-NP")

        assert not continues_run(sentence, 0)
        assert not continues_run(sentence, 2)
