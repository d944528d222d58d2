# ==============================================================================
# FILE: udpcore/reconciler.py
# PURPOSE: Turns cumulative kernel drop totals into non-negative deltas.
# ==============================================================================
from typing import Optional, Tuple

from .data_models import ReconcilerState, check_protocol


def compute_delta(current: int, prior: int) -> Tuple[int, int]:
    """Returns (delta to apply, new baseline)."""
    delta = current - prior
    if delta < 0:
        return 0, current
    return delta, current


class SampleReconciler:
    def __init__(self, state: Optional[ReconcilerState] = None):
        self.state = state or ReconcilerState()

    def baseline(self, protocol: str) -> int:
        return self.state.last_dropped_total.get(check_protocol(protocol), 0)

    def reconcile(self, protocol: str, current: int) -> int:
        """Call once per protocol per tick with a freshly sampled total."""
        prior = self.baseline(protocol)
        delta, baseline = compute_delta(current, prior)
        if current < prior:
            print(f"[Reconciler] Dropped count for {protocol} went backwards "
                  f"({prior} -> {current}), resetting baseline", flush=True)
        self.state.last_dropped_total[protocol] = baseline
        return delta
