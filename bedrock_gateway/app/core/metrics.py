from typing import Dict
from collections import defaultdict


class Metrics:
    """In-process request counters, reported as JSON by /metrics."""

    def __init__(self) -> None:
        self._request_count: Dict[str, int] = defaultdict(int)
        self._error_count: Dict[str, int] = defaultdict(int)
        self._latency_sum: Dict[str, float] = defaultdict(float)
        self._latency_count: Dict[str, int] = defaultdict(int)
        self._inference_failures: int = 0

    def record_request(self, endpoint: str, status_code: int, latency_sec: float) -> None:
        """Record a request with status and latency."""
        self._request_count[f"{endpoint}_{status_code}"] += 1
        self._latency_sum[endpoint] += latency_sec
        self._latency_count[endpoint] += 1

        if status_code >= 400:
            self._error_count[f"{endpoint}_{status_code}"] += 1

    def record_inference_failure(self) -> None:
        self._inference_failures += 1

    def get_metrics(self) -> Dict:
        metrics: Dict = {
            "requests_total": dict(self._request_count),
            "errors_total": dict(self._error_count),
            "inference_failures_total": self._inference_failures,
        }

        avg_latencies: Dict[str, float] = {}
        for endpoint, total in self._latency_sum.items():
            count = self._latency_count.get(endpoint, 0)
            avg_latencies[f"{endpoint}_avg_seconds"] = total / count if count > 0 else 0.0

        metrics["latency_avg_seconds"] = avg_latencies
        return metrics
