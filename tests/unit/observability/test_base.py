from roast_kit.observability.base import InMemoryMetricsHook, NoOpMetricsHook


class TestInMemoryMetricsHook:
    def test_counters_accumulate(self) -> None:
        hook = InMemoryMetricsHook()

        hook.increment("hits")
        hook.increment("hits", 4)

        assert hook.counter("hits") == 5

    def test_labels_are_tracked_separately(self) -> None:
        hook = InMemoryMetricsHook()

        hook.increment("items", 2, labels={"category": "english"})
        hook.increment("items", 3, labels={"category": "memes"})

        assert hook.counter("items", {"category": "english"}) == 2
        assert hook.counter("items", {"category": "memes"}) == 3
        assert hook.counter("items") == 0

    def test_label_order_does_not_matter(self) -> None:
        hook = InMemoryMetricsHook()

        hook.increment("x", labels={"a": "1", "b": "2"})

        assert hook.counter("x", {"b": "2", "a": "1"}) == 1

    def test_gauge_keeps_last_value(self) -> None:
        hook = InMemoryMetricsHook()

        hook.record_gauge("size", 3)
        hook.record_gauge("size", 7)

        assert hook.gauge("size") == 7
        assert hook.gauge("unknown") is None

    def test_latency_keeps_every_sample(self) -> None:
        hook = InMemoryMetricsHook()

        hook.record_latency("parse", 1.5)
        hook.record_latency("parse", 2.5)

        assert hook.samples("parse") == [1.5, 2.5]
        assert hook.samples("missing") == []


def test_noop_hook_accepts_all_calls() -> None:
    hook = NoOpMetricsHook()

    hook.increment("a")
    hook.record_gauge("b", 1.0, labels={"k": "v"})
    hook.record_latency("c", 2.0)
