from chunk_tagger.observability import NoOpMetricsHook, names


def test_noop_hook_accepts_all_calls() -> None:
    hook = NoOpMetricsHook()

    hook.record_latency(names.TAGGING_DURATION, 1.5, {"tagger": "Animal"})
    hook.increment(names.TAGGING_TAGS_TOTAL)
    hook.record_gauge(names.TAGGING_SENTENCE_LENGTH, 4)


def test_metric_names_are_unique() -> None:
    values = [v for k, v in vars(names).items() if k.isupper()]

    assert len(values) == len(set(values))
