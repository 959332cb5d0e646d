from chunk_tagger.normalization import normalize


def test_normalize_case_folds() -> None:
    assert normalize("Dog") == "dog"


def test_normalize_strips_whitespace() -> None:
    assert normalize("  dog\t") == "dog"


def test_normalize_uses_full_case_folding() -> None:
    assert normalize("Straße") == "strasse"


def test_normalize_is_stable() -> None:
    assert normalize(normalize("RUN")) == normalize("RUN")
