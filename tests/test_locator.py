import psutil
import pytest

from conftest import FakeProcess
from udpcore.locator import ProcessNotFound, locate


def test_not_found():
    with pytest.raises(ProcessNotFound) as excinfo:
        locate("statsd_exporter", [FakeProcess(1, "init"), FakeProcess(2, "sshd")])
    assert excinfo.value.name == "statsd_exporter"


def test_single_match():
    identity = locate("sshd", [FakeProcess(1, "init"), FakeProcess(77, "sshd")])
    assert identity.pid == 77
    assert identity.name == "sshd"
    assert identity.resolved


def test_first_match_in_scan_order_wins():
    procs = [FakeProcess(10, "worker"), FakeProcess(3, "worker")]
    assert locate("worker", procs).pid == 10


def test_match_is_exact():
    with pytest.raises(ProcessNotFound):
        locate("ssh", [FakeProcess(1, "sshd"), FakeProcess(2, "SSH")])


def test_unreadable_entries_are_skipped():
    procs = [
        FakeProcess(1, "x", error=psutil.AccessDenied(1)),
        FakeProcess(2, "x", error=psutil.NoSuchProcess(2)),
        FakeProcess(3, "x", error=psutil.ZombieProcess(3)),
        FakeProcess(4, "statsd_exporter"),
    ]
    assert locate("statsd_exporter", procs).pid == 4


def test_scans_live_processes_by_default(monkeypatch):
    monkeypatch.setattr(psutil, "process_iter", lambda: iter([FakeProcess(9, "target")]))
    assert locate("target").pid == 9


def test_matches_status_name_of_long_executable():
    # /proc/<pid>/status shows "averyveryverylo", psutil reports the full name
    procs = [FakeProcess(1, "init"), FakeProcess(31, "averyveryverylongname")]
    assert locate("averyveryverylo", procs).pid == 31
    assert locate("averyveryverylongname", procs).pid == 31


def test_short_prefix_of_long_name_does_not_match():
    with pytest.raises(ProcessNotFound):
        locate("averyvery", [FakeProcess(31, "averyveryverylongname")])
