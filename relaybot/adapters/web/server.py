"""FastAPI liveness app for hosting-platform health checks."""

import sys

import uvicorn
from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel

from relaybot import __version__


def _log(msg: str):
    print(msg, file=sys.stderr)


class HealthResponse(BaseModel):
    status: str
    version: str


def create_app() -> FastAPI:
    """Build the liveness app. Stateless; independent of the gateway session."""
    app = FastAPI(title="relaybot", version=__version__)

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return "ok"

    @app.get("/healthz", response_model=HealthResponse)
    async def healthz():
        return HealthResponse(status="ok", version=__version__)

    return app


class LivenessServer(uvicorn.Server):
    """uvicorn server that announces itself once the socket is bound."""

    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        if self.started:
            _log(f"[web] HTTP server listening on {self.config.port}")


app = create_app()
