# ==============================================================================
# FILE: udpcore/sampler.py
# PURPOSE: Periodically samples both UDP socket tables and feeds the sink.
# ==============================================================================
import time
from typing import Callable, Dict, Optional

from . import config
from .data_models import PROTOCOLS, ParseResult, ProcessIdentity
from .metrics import MetricsSink
from .parser import read_socket_table
from .reconciler import SampleReconciler


class SamplingLoop:
    def __init__(self, identity: ProcessIdentity, sink: MetricsSink,
                 reconciler: Optional[SampleReconciler] = None,
                 interval: float = config.SAMPLE_INTERVAL,
                 proc_root: str = config.PROC_ROOT,
                 sleep: Callable[[float], None] = time.sleep):
        self.identity = identity
        self.sink = sink
        self.reconciler = reconciler or SampleReconciler()
        self.interval = interval
        self.proc_root = proc_root
        self.sleep = sleep

    def sample(self, protocol: str) -> ParseResult:
        path = self.identity.socket_table_path(protocol, self.proc_root)
        result = read_socket_table(protocol, path)
        queued, dropped = result.totals()
        if result.ok:
            delta = self.reconciler.reconcile(protocol, dropped)
        else:
            # A table we could not read is not a counter reset; keep the baseline.
            delta = 0
        self.sink.update(protocol, queued, delta)
        return result

    def tick(self) -> Dict[str, ParseResult]:
        results = {}
        for protocol in PROTOCOLS:
            try:
                results[protocol] = self.sample(protocol)
            except Exception as e:
                print(f"[Sampler] Error sampling {protocol}: {e}", flush=True)
        return results

    def run(self, max_ticks: Optional[int] = None):
        """Samples forever, or `max_ticks` times when given."""
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            self.tick()
            ticks += 1
            self.sleep(self.interval)
