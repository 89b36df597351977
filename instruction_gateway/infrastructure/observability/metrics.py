"""Prometheus metrics for monitoring instruction outcomes and request latency"""

from prometheus_client import Counter, Histogram

from instruction_gateway.domain.models import TransactionOutcome

# Instruction metrics
instruction_counter = Counter(
    "payment_instruction_total",
    "Total payment instructions processed",
    ["status", "status_code"],  # successful | pending | failed, AP00 ...
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_outcome(outcome: TransactionOutcome) -> None:
    """Record one processed instruction by status and code"""
    instruction_counter.labels(
        status=outcome.status.value,
        status_code=outcome.status_code.value,
    ).inc()
