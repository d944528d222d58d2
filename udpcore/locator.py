# ==============================================================================
# FILE: udpcore/locator.py
# PURPOSE: One-shot scan of the process table to resolve a name to a PID.
# ==============================================================================
from typing import Iterable, Optional

import psutil

from .data_models import ProcessIdentity

# The kernel cuts the status Name: field to this many characters
TASK_COMM_LEN = 15


class ProcessNotFound(LookupError):
    """Raised when no live process carries the requested name."""

    def __init__(self, name: str):
        super().__init__(f"Unable to find proc with the name: {name}")
        self.name = name


def locate(name: str, processes: Optional[Iterable] = None) -> ProcessIdentity:
    """
    Walks the live processes in scan order and returns the first one whose
    registered name is exactly `name`. Processes that vanish or cannot be
    read mid-scan are skipped.
    """
    if processes is None:
        processes = psutil.process_iter()

    for proc in processes:
        try:
            proc_name = proc.name()
            # psutil may expand a truncated comm to the full executable name
            if proc_name == name or (len(proc_name) > TASK_COMM_LEN
                                     and proc_name[:TASK_COMM_LEN] == name):
                return ProcessIdentity(name=name, pid=proc.pid)
        except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
            continue
    raise ProcessNotFound(name)
