# ==============================================================================
# FILE: udpcore/data_models.py
# PURPOSE: Defines the value types shared by the locator, parser and sampler.
# ==============================================================================
import os
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

from . import config

UDP = "udp"
UDP6 = "udp6"
PROTOCOLS = (UDP, UDP6)


def check_protocol(protocol: str) -> str:
    if protocol not in PROTOCOLS:
        raise ValueError(f"Unsupported protocol: {protocol!r}")
    return protocol


@dataclass(frozen=True)
class ProcessIdentity:
    """The process being watched, resolved once at startup."""
    name: str
    pid: int
    resolved: bool = True

    def socket_table_path(self, protocol: str, proc_root: str = config.PROC_ROOT) -> str:
        return os.path.join(proc_root, str(self.pid), "net", check_protocol(protocol))


@dataclass(frozen=True)
class SocketTableSnapshot:
    protocol: str
    queued_total: int = 0
    dropped_total: int = 0


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of reading one socket table. Either carries a snapshot, or
    the reason the table could not be used for this tick.
    """
    protocol: str
    snapshot: Optional[SocketTableSnapshot] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, protocol: str, queued: int, dropped: int) -> "ParseResult":
        return cls(protocol, snapshot=SocketTableSnapshot(protocol, queued, dropped))

    @classmethod
    def failure(cls, protocol: str, error: str) -> "ParseResult":
        return cls(protocol, error=error)

    @property
    def ok(self) -> bool:
        return self.snapshot is not None

    def totals(self) -> Tuple[int, int]:
        if self.snapshot is None:
            return 0, 0
        return self.snapshot.queued_total, self.snapshot.dropped_total


@dataclass
class ReconcilerState:
    # Last observed cumulative drop total per protocol
    last_dropped_total: Dict[str, int] = field(
        default_factory=lambda: {protocol: 0 for protocol in PROTOCOLS}
    )
