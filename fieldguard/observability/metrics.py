"""
Prometheus metrics collection for fieldguard

This module provides metrics instrumentation for monitoring
rule registration and evaluation volume, outcomes, and latency.
"""
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    CollectorRegistry,
    Counter,
    Histogram,
    generate_latest,
)


# Private registry so embedding applications keep their own default one clean
REGISTRY = CollectorRegistry()


# =======================
# REGISTRATION METRICS
# =======================

registrations_total = Counter(
    name="fieldguard_registrations_total",
    documentation="Total number of rules registered on validator engines",
    labelnames=["rule_kind"],
    registry=REGISTRY,
)

# =======================
# EVALUATION METRICS
# =======================

evaluations_total = Counter(
    name="fieldguard_evaluations_total",
    documentation="Total number of evaluation passes",
    labelnames=["outcome"],  # outcome: passed, failed
    registry=REGISTRY,
)

validation_failures_total = Counter(
    name="fieldguard_validation_failures_total",
    documentation="Total number of collected validation failures",
    registry=REGISTRY,
)

evaluation_duration_seconds = Histogram(
    name="fieldguard_evaluation_duration_seconds",
    documentation="Time spent in one evaluation pass in seconds",
    buckets=[0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0],
    registry=REGISTRY,
)


# =======================
# HELPER FUNCTIONS
# =======================

def generate_metrics() -> bytes:
    """
    Generate Prometheus metrics in text format

    Returns:
        Metrics in Prometheus text format
    """
    return generate_latest(REGISTRY)


def get_content_type() -> str:
    """
    Get content type for Prometheus metrics

    Returns:
        Content type string
    """
    return CONTENT_TYPE_LATEST


def increment_counter(counter: Counter, value: float = 1.0, **labels) -> None:
    """
    Increment a counter metric

    Args:
        counter: Prometheus Counter metric
        value: Amount to increment (default: 1.0)
        **labels: Label values for the metric
    """
    if labels:
        counter.labels(**labels).inc(value)
    else:
        counter.inc(value)


# =======================
# ENGINE HELPERS
# =======================

def record_registration(rule_kind: str) -> None:
    """
    Record one rule registration.

    Args:
        rule_kind: Kind of the registered rule
    """
    increment_counter(registrations_total, 1, rule_kind=rule_kind)


def record_evaluation(passed: bool, failure_count: int, duration_seconds: float) -> None:
    """
    Record one evaluation pass.

    Args:
        passed: Whether the pass ended with an empty failure list
        failure_count: Failures appended during this pass
        duration_seconds: Time taken by the pass
    """
    increment_counter(evaluations_total, 1, outcome="passed" if passed else "failed")
    if failure_count > 0:
        increment_counter(validation_failures_total, failure_count)
    evaluation_duration_seconds.observe(duration_seconds)
