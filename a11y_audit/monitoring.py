"""
Monitoring & Metrics Collection - Prometheus-compatible metrics

In-process counters and histograms for the scan pipeline:
- Scans by outcome (success, invalid_url, browser_error, audit_error)
- Scan duration
- Findings audited
- Enrichment outcomes (ai, fallback)

Exported in Prometheus text format by the /metrics endpoint.
"""

from enum import Enum
from typing import Dict, List, Optional, Tuple

LabelKey = Tuple[Tuple[str, str], ...]


class MetricType(Enum):
    """Types of metrics."""
    COUNTER = "counter"
    HISTOGRAM = "histogram"


class Metric:
    """Base metric class."""

    def __init__(self, name: str, metric_type: MetricType, help_text: str = ""):
        """
        Initialize metric.

        Args:
            name: Metric name (must be valid Prometheus name)
            metric_type: Type of metric (counter, histogram)
            help_text: Human-readable description
        """
        self.name = name
        self.metric_type = metric_type
        self.help_text = help_text


def _label_key(labels: Dict[str, str]) -> LabelKey:
    return tuple(sorted((k, str(v)) for k, v in labels.items()))


class Counter(Metric):
    """Cumulative counter metric, one series per label set."""

    def __init__(self, name: str, help_text: str = ""):
        super().__init__(name, MetricType.COUNTER, help_text)
        self.series: Dict[LabelKey, float] = {}

    def increment(self, amount: float = 1, **labels) -> None:
        """
        Increment counter.

        Args:
            amount: Amount to increment (default: 1)
            **labels: Label key-value pairs for dimensionality
        """
        key = _label_key(labels)
        self.series[key] = self.series.get(key, 0) + amount

    def get(self, **labels) -> float:
        """Current value of the series matching labels."""
        return self.series.get(_label_key(labels), 0)


class Histogram(Metric):
    """Histogram metric for distributions."""

    # Page loads dominate scan time, so buckets run up to the audit timeout
    DEFAULT_BUCKETS = [0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 30.0, 60.0]

    def __init__(
        self, name: str, help_text: str = "", buckets: Optional[List[float]] = None
    ):
        super().__init__(name, MetricType.HISTOGRAM, help_text)
        self.buckets = buckets or self.DEFAULT_BUCKETS
        self.values: List[float] = []
        self.count = 0
        self.sum = 0.0

    def observe(self, value: float) -> None:
        """Record an observation."""
        self.values.append(value)
        self.count += 1
        self.sum += value


class MetricsCollector:
    """
    Central metrics registry with Prometheus-format export.
    """

    def __init__(self):
        """Initialize metrics collector."""
        self.metrics: Dict[str, Metric] = {}
        self._setup_default_metrics()

    def _setup_default_metrics(self) -> None:
        """Set up scan pipeline metrics."""
        self.register_counter("scans_total", "Total scans by outcome")
        self.register_histogram("scan_duration_seconds", "End-to-end scan duration")
        self.register_counter("findings_total", "Total findings reported by the audit engine")
        self.register_counter(
            "enrichments_total", "Total finding enrichments by suggestion source"
        )

    def register_counter(self, name: str, help_text: str = "") -> Counter:
        """Register and return a counter metric."""
        counter = Counter(name, help_text)
        self.metrics[name] = counter
        return counter

    def register_histogram(
        self, name: str, help_text: str = "", buckets: Optional[List[float]] = None
    ) -> Histogram:
        """Register and return a histogram metric."""
        histogram = Histogram(name, help_text, buckets)
        self.metrics[name] = histogram
        return histogram

    def get_metric(self, name: str) -> Optional[Metric]:
        """Get metric by name (None if not registered)."""
        return self.metrics.get(name)

    def increment(self, name: str, amount: float = 1, **labels) -> None:
        metric = self.get_metric(name)
        if isinstance(metric, Counter):
            metric.increment(amount, **labels)

    def observe(self, name: str, value: float) -> None:
        metric = self.get_metric(name)
        if isinstance(metric, Histogram):
            metric.observe(value)

    def export_prometheus(self) -> str:
        """
        Export all metrics in Prometheus text exposition format.

        Returns:
            Metrics text with HELP/TYPE headers
        """
        lines = []

        for name, metric in sorted(self.metrics.items()):
            if metric.help_text:
                lines.append(f"# HELP {name} {metric.help_text}")
            lines.append(f"# TYPE {name} {metric.metric_type.value}")

            if isinstance(metric, Counter):
                if not metric.series:
                    lines.append(f"{name} 0")
                for key, value in sorted(metric.series.items()):
                    lines.append(f"{name}{self._format_labels(dict(key))} {value}")

            elif isinstance(metric, Histogram):
                for bucket in metric.buckets:
                    bucket_count = sum(1 for v in metric.values if v <= bucket)
                    lines.append(f'{name}_bucket{{le="{bucket}"}} {bucket_count}')
                lines.append(f'{name}_bucket{{le="+Inf"}} {metric.count}')
                lines.append(f"{name}_count {metric.count}")
                lines.append(f"{name}_sum {metric.sum}")

            lines.append("")  # Blank line between metrics

        return "\n".join(lines)

    def _format_labels(self, labels: Dict[str, str]) -> str:
        """Format labels for Prometheus output."""
        if not labels:
            return ""
        label_pairs = [f'{k}="{v}"' for k, v in sorted(labels.items())]
        return "{" + ",".join(label_pairs) + "}"

    def clear(self) -> None:
        """Clear all metrics (useful for testing)."""
        self.metrics.clear()
        self._setup_default_metrics()


# Global metrics instance
_metrics_instance: Optional[MetricsCollector] = None


def get_metrics() -> MetricsCollector:
    """Get or create global metrics instance."""
    global _metrics_instance
    if _metrics_instance is None:
        _metrics_instance = MetricsCollector()
    return _metrics_instance
