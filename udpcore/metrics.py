# ==============================================================================
# FILE: udpcore/metrics.py
# PURPOSE: Holds the exported gauge/counter and renders them for scraping.
# ==============================================================================
from threading import Lock
from typing import Any, Dict, Optional

from prometheus_client import CollectorRegistry, Counter, Gauge, generate_latest

from . import config
from .data_models import PROTOCOLS, check_protocol


class MetricsSink:
    """
    Written by the sampling thread, read by the HTTP server. The Prometheus
    metrics carry their own locks; `data_lock` guards the JSON view.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None):
        self.registry = registry if registry is not None else CollectorRegistry()
        self.queued = Gauge(config.QUEUED_METRIC, config.QUEUED_HELP,
                            ["protocol"], registry=self.registry)
        self.dropped = Counter(config.DROPPED_METRIC, config.DROPPED_HELP,
                               ["protocol"], registry=self.registry)
        self.data_lock = Lock()
        self.latest: Dict[str, Dict[str, Any]] = {}
        for protocol in PROTOCOLS:
            self.queued.labels(protocol).set(0)
            self.dropped.labels(protocol)
            self.latest[protocol] = {'queued': 0, 'dropped': 0, 'ticks': 0}

    def update(self, protocol: str, queued: int, delta: int):
        check_protocol(protocol)
        if delta < 0:
            raise ValueError(f"counter delta must be non-negative, got {delta}")
        self.queued.labels(protocol).set(queued)
        if delta:
            self.dropped.labels(protocol).inc(delta)
        with self.data_lock:
            entry = self.latest[protocol]
            entry['queued'] = queued
            entry['dropped'] += delta
            entry['ticks'] += 1

    def snapshot(self) -> Dict[str, Dict[str, Any]]:
        with self.data_lock:
            return {protocol: dict(entry) for protocol, entry in self.latest.items()}

    def render(self) -> bytes:
        return generate_latest(self.registry)
