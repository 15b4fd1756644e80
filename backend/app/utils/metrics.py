"""Prometheus metrics for collection file mutations."""

from prometheus_client import Counter, Histogram

store_mutation_latency_ms = Histogram(
    "store_mutation_latency_ms",
    "Read-transform-write latency in milliseconds, including queue wait",
    ["collection", "outcome"],
    buckets=[1, 5, 10, 25, 50, 100, 250, 500, 1000, 2500],
)

store_mutation_errors_total = Counter(
    "store_mutation_errors_total",
    "Total failed store mutations",
    ["collection", "reason"],
)

store_queue_waits_total = Counter(
    "store_queue_waits_total",
    "Total mutations that waited for a pending mutation on the same file",
    ["collection"],
)


class PrometheusStoreMetrics:
    """Prometheus-based store metrics implementation."""

    def record_latency(self, collection: str, outcome: str, latency_ms: float) -> None:
        """Record mutation latency."""
        store_mutation_latency_ms.labels(collection=collection, outcome=outcome).observe(latency_ms)

    def inc_error(self, collection: str, reason: str) -> None:
        """Increment error counter."""
        store_mutation_errors_total.labels(collection=collection, reason=reason).inc()

    def inc_queue_wait(self, collection: str) -> None:
        """Increment queue wait counter."""
        store_queue_waits_total.labels(collection=collection).inc()
