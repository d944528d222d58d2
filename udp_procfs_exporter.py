# PURPOSE: Main entry point for the exporter. Run this file.
# ==============================================================================
import argparse
import sys
from threading import Thread

import uvicorn

from udpcore import config
from udpcore.locator import ProcessNotFound, locate
from udpcore.metrics import MetricsSink
from udpcore.sampler import SamplingLoop
from udpweb.api import create_app


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="udp-procfs-exporter",
                                description="Export UDP socket buffer stats of one process")
    p.add_argument("processname", help="Name of the process to watch")
    p.add_argument("--listen-address", default=config.LISTEN_HOST,
                   help=f"Address to serve metrics on (default: {config.LISTEN_HOST})")
    p.add_argument("--port", type=int, default=config.LISTEN_PORT,
                   help=f"Port to serve metrics on (default: {config.LISTEN_PORT})")
    p.add_argument("--interval", type=float, default=config.SAMPLE_INTERVAL,
                   help=f"Seconds between samples (default: {config.SAMPLE_INTERVAL:g})")
    p.add_argument("--proc-root", default=config.PROC_ROOT,
                   help=f"procfs mount point (default: {config.PROC_ROOT})")
    p.add_argument("--log-level", default="info", help="uvicorn log level")
    args = p.parse_args(argv)
    if args.interval <= 0:
        p.error("--interval must be positive")
    return args


def main(argv=None):
    if not sys.platform.startswith("linux"):
        print("ProcFS is only supported on linux!")
        sys.exit(1)

    args = parse_args(argv)
    try:
        identity = locate(args.processname)
    except ProcessNotFound as e:
        print(e)
        sys.exit(1)

    sink = MetricsSink()
    loop = SamplingLoop(identity, sink, interval=args.interval, proc_root=args.proc_root)
    sampler_thread = Thread(target=loop.run, name="sampler", daemon=True)
    sampler_thread.start()

    print(f"UDP Procfs Exporter started, watching PID {identity.pid}", flush=True)
    print(f"[Exporter] Serving http://{args.listen_address}:{args.port}{config.METRICS_PATH}",
          flush=True)
    uvicorn.run(create_app(sink, identity, args.interval),
                host=args.listen_address, port=args.port, log_level=args.log_level)


if __name__ == '__main__':
    main()
