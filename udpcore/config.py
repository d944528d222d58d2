# ==============================================================================
# FILE: udpcore/config.py
# PURPOSE: Default settings for the exporter, overridable from the environment.
# ==============================================================================
import os

LISTEN_HOST = os.environ.get("UDP_EXPORTER_HOST", "0.0.0.0")
LISTEN_PORT = int(os.environ.get("UDP_EXPORTER_PORT", "8125"))
METRICS_PATH = "/metrics"
SAMPLE_INTERVAL = float(os.environ.get("UDP_EXPORTER_INTERVAL", "10"))
PROC_ROOT = os.environ.get("UDP_EXPORTER_PROC_ROOT", "/proc")

QUEUED_METRIC = "statsd_exporter_udp_buffer_queued"
QUEUED_HELP = "The number of queued UDP messages in the linux buffer."
DROPPED_METRIC = "statsd_exporter_udp_buffer_dropped"
DROPPED_HELP = "The number of dropped UDP messages in the linux buffer"
