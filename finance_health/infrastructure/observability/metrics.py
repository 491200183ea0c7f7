"""Prometheus metrics for monitoring health scores, debt planning and storage failures"""

from prometheus_client import Counter, Histogram

# Analysis metrics
analysis_counter = Counter(
    "finance_health_analysis_total",
    "Total financial health analyses computed",
    ["tier"],  # excellent | on_track | needs_improvement | needs_attention | incomplete_data | no_data
)

health_score_histogram = Histogram(
    "finance_health_score",
    "Distribution of computed health scores",
    buckets=[10, 20, 30, 40, 50, 60, 70, 80, 90, 100],
)

# Debt planning metrics
debt_prioritization_counter = Counter(
    "finance_health_debt_prioritization_total",
    "Debt payoff orderings produced",
    ["strategy"],  # avalanche | snowball
)

# Storage metrics
data_source_failures_counter = Counter(
    "data_source_failures_total",
    "Failed loads of user financial records",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_analysis(score: int, tier: str) -> None:
    """Record score distribution and tier counts"""
    analysis_counter.labels(tier=tier).inc()
    health_score_histogram.observe(score)


def record_prioritization(strategy: str) -> None:
    debt_prioritization_counter.labels(strategy=strategy).inc()
