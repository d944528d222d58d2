# FILE: udpweb/api.py
# PURPOSE: FastAPI app exposing the sink for Prometheus and for humans.

import html

from fastapi import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST

from udpcore import config
from udpcore.data_models import ProcessIdentity
from udpcore.metrics import MetricsSink

LANDING_PAGE = """<html>
<head><title>UDP Procfs Exporter</title></head>
<body>
<h1>UDP Procfs Exporter</h1>
<p>Watching {name} (PID {pid})</p>
<p><a href="{path}">Metrics</a></p>
</body>
</html>
"""


def create_app(sink: MetricsSink, identity: ProcessIdentity,
               interval: float = config.SAMPLE_INTERVAL) -> FastAPI:
    app = FastAPI(title="UDP Procfs Exporter")

    @app.get(config.METRICS_PATH)
    async def get_metrics():
        return Response(content=sink.render(), media_type=CONTENT_TYPE_LATEST)

    @app.get("/", response_class=HTMLResponse)
    async def get_root():
        return HTMLResponse(content=LANDING_PAGE.format(
            name=html.escape(identity.name), pid=identity.pid, path=config.METRICS_PATH))

    @app.get("/api/status", response_class=JSONResponse)
    async def get_status():
        return {
            'process': {'name': identity.name, 'pid': identity.pid},
            'interval': interval,
            'protocols': sink.snapshot(),
        }

    return app
