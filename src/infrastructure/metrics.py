# src/infrastructure/metrics.py

from prometheus_client import REGISTRY, CollectorRegistry, Counter

from src.application.ports import FailureRecorder


class PrometheusFailureRecorder(FailureRecorder):
    """
    Prometheus counters for failed ticket purchases.

    Counter increments are thread-safe, so one recorder can be shared
    by concurrent requests.
    """

    def __init__(self, registry: CollectorRegistry = REGISTRY):
        # Hard failures from the payment or seat booking services
        self.failed_events = Counter(
            "cinema_ticket_failure_events",
            "total failure number of events",
            registry=registry,
        )
        # Purchases rejected by business validation
        self.failed_business_validations = Counter(
            "cinema_ticket_business_failure_events",
            "total failed business validations",
            registry=registry,
        )

    def record_business_failure(self) -> None:
        self.failed_business_validations.inc()

    def record_operational_failure(self) -> None:
        self.failed_events.inc()
