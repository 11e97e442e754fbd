"""
Tests for monitoring and metrics collection.

Coverage:
- Counter series per label set
- Histogram observations
- MetricsCollector registration and tracking
- Prometheus format export
- Global metrics instance management
"""

from a11y_audit.monitoring import (
    Counter,
    Histogram,
    MetricsCollector,
    get_metrics,
)


class TestCounter:
    """Test counter metrics."""

    def test_counter_initialization(self):
        """Counter: initializes with zero value."""
        counter = Counter("test_counter", "Test counter")
        assert counter.get() == 0
        assert counter.name == "test_counter"

    def test_counter_increment_with_amount(self):
        counter = Counter("test_counter")
        counter.increment()
        counter.increment(5)
        assert counter.get() == 6

    def test_counter_series_per_label_set(self):
        """Counter: each label set is tracked separately."""
        counter = Counter("scans")
        counter.increment(outcome="success")
        counter.increment(outcome="success")
        counter.increment(outcome="audit_error")

        assert counter.get(outcome="success") == 2
        assert counter.get(outcome="audit_error") == 1
        assert counter.get(outcome="invalid_url") == 0
        assert counter.get() == 0


class TestHistogram:
    """Test histogram metrics."""

    def test_histogram_initialization(self):
        histogram = Histogram("test_histogram")
        assert histogram.count == 0
        assert histogram.buckets == Histogram.DEFAULT_BUCKETS

    def test_histogram_observe(self):
        histogram = Histogram("test_histogram", buckets=[1.0, 5.0])
        histogram.observe(0.4)
        histogram.observe(3.1)

        assert histogram.count == 2
        assert histogram.sum == 3.5


class TestMetricsCollector:
    """Test metrics collector."""

    def test_scan_metrics_registered(self):
        collector = MetricsCollector()

        assert isinstance(collector.get_metric("scans_total"), Counter)
        assert isinstance(collector.get_metric("findings_total"), Counter)
        assert isinstance(collector.get_metric("enrichments_total"), Counter)
        assert isinstance(collector.get_metric("scan_duration_seconds"), Histogram)

    def test_increment_and_observe_by_name(self):
        collector = MetricsCollector()
        collector.increment("enrichments_total", source="ai")
        collector.observe("scan_duration_seconds", 2.0)

        assert collector.get_metric("enrichments_total").get(source="ai") == 1
        assert collector.get_metric("scan_duration_seconds").count == 1

    def test_unknown_metric_is_ignored(self):
        collector = MetricsCollector()
        collector.increment("no_such_metric")
        collector.observe("no_such_metric", 1.0)

        assert collector.get_metric("no_such_metric") is None

    def test_clear_metrics(self):
        """Clear: resets values and keeps default metrics registered."""
        collector = MetricsCollector()
        collector.increment("scans_total", outcome="success")
        collector.register_counter("custom")

        collector.clear()

        assert collector.get_metric("scans_total").get(outcome="success") == 0
        assert collector.get_metric("custom") is None


class TestPrometheusExport:
    """Test Prometheus format export."""

    def test_export_counter_with_labels(self):
        collector = MetricsCollector()
        collector.increment("scans_total", outcome="success")

        output = collector.export_prometheus()

        assert "# HELP scans_total Total scans by outcome" in output
        assert "# TYPE scans_total counter" in output
        assert 'scans_total{outcome="success"} 1' in output

    def test_export_empty_counter(self):
        output = MetricsCollector().export_prometheus()
        assert "findings_total 0" in output

    def test_export_histogram(self):
        collector = MetricsCollector()
        collector.observe("scan_duration_seconds", 3.0)

        output = collector.export_prometheus()

        assert "# TYPE scan_duration_seconds histogram" in output
        assert 'scan_duration_seconds_bucket{le="2.5"} 0' in output
        assert 'scan_duration_seconds_bucket{le="5.0"} 1' in output
        assert 'scan_duration_seconds_bucket{le="+Inf"} 1' in output
        assert "scan_duration_seconds_count 1" in output
        assert "scan_duration_seconds_sum 3.0" in output

    def test_export_is_sorted(self):
        output = MetricsCollector().export_prometheus()
        names = [line.split()[2] for line in output.splitlines() if line.startswith("# TYPE")]
        assert names == sorted(names)


def test_get_metrics_returns_singleton():
    assert get_metrics() is get_metrics()
