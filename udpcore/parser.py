# ==============================================================================
# FILE: udpcore/parser.py
# PURPOSE: Parses /proc/<pid>/net/udp{,6} into per-protocol totals.
# ==============================================================================
import string
from typing import Tuple

from .data_models import ParseResult, check_protocol

QUEUE_FIELD = 4
DROPS_FIELD = 12
MAX_QUEUE = 0x7FFFFFFF


def _parse_row(line: str) -> Tuple[int, int]:
    fields = line.split()
    if len(fields) <= DROPS_FIELD:
        raise ValueError(f"expected at least {DROPS_FIELD + 1} fields, got {len(fields)}")

    tx_queue, sep, _ = fields[QUEUE_FIELD].partition(":")
    if not sep or not tx_queue or not all(c in string.hexdigits for c in tx_queue):
        raise ValueError(f"malformed queue field {fields[QUEUE_FIELD]!r}")
    queued = int(tx_queue, 16)
    if not 0 <= queued <= MAX_QUEUE:
        raise ValueError(f"queue value {tx_queue!r} out of range")

    drops = fields[DROPS_FIELD]
    if not drops.isdigit():
        raise ValueError(f"invalid drop count {drops!r}")
    return queued, int(drops)


def parse_socket_table(protocol: str, text: str) -> ParseResult:
    """
    Sums the tx_queue and drops columns over every socket row. One bad row
    fails the whole table; sums from earlier rows are not reported.
    """
    check_protocol(protocol)
    queued = 0
    dropped = 0
    for n, line in enumerate(text.splitlines()):
        # Skip the header line.
        if n < 1 or not line.strip():
            continue
        try:
            row_queued, row_dropped = _parse_row(line)
        except ValueError as e:
            print(f"[Parser] Unable to parse {protocol} buffers on line {n + 1}: {e}", flush=True)
            return ParseResult.failure(protocol, str(e))
        queued += row_queued
        dropped += row_dropped
    return ParseResult.success(protocol, queued, dropped)


def read_socket_table(protocol: str, path: str) -> ParseResult:
    check_protocol(protocol)
    try:
        with open(path) as f:
            text = f.read()
    except OSError as e:
        # The process may simply have gone away; the next tick tries again.
        return ParseResult.failure(protocol, f"unable to read {path}: {e}")
    except UnicodeDecodeError as e:
        print(f"[Parser] Unable to decode {path}: {e}", flush=True)
        return ParseResult.failure(protocol, f"unable to decode {path}: {e}")
    return parse_socket_table(protocol, text)


def parse(protocol: str, text: str) -> Tuple[int, int]:
    """(queued, dropped) for a socket table, (0, 0) if it could not be parsed."""
    return parse_socket_table(protocol, text).totals()
