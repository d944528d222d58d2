import pytest

from udpcore.data_models import ProcessIdentity
from udpcore.metrics import MetricsSink

HEADER = ("   sl  local_address rem_address   st tx_queue rx_queue tr tm->when "
          "retrnsmt   uid  timeout inode ref pointer drops")


def udp_row(sl, queues, drops):
    """One /proc/<pid>/net/udp line; `queues` is the raw tx:rx field."""
    return (f"  {sl}: 00000000:04D2 00000000:0000 07 {queues} 00:00000000 00000000 "
            f" 1000        0 31337 2 0000000000000000 {drops}")


def udp_table(*rows):
    return "\n".join([HEADER] + list(rows)) + "\n"


class FakeProcess:
    def __init__(self, pid, name, error=None):
        self.pid = pid
        self._name = name
        self._error = error

    def name(self):
        if self._error is not None:
            raise self._error
        return self._name


@pytest.fixture
def identity():
    return ProcessIdentity(name="statsd_exporter", pid=4242)


@pytest.fixture
def sink():
    return MetricsSink()


@pytest.fixture
def proc_root(tmp_path, identity):
    (tmp_path / str(identity.pid) / "net").mkdir(parents=True)
    return tmp_path


def write_table(proc_root, pid, protocol, text):
    (proc_root / str(pid) / "net" / protocol).write_text(text)
