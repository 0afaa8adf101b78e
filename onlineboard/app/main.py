import time, logging
from typing import Optional
import httpx
from fastapi import FastAPI
from fastapi.responses import HTMLResponse, JSONResponse
from .config import Settings, LOG_FORMAT
from .endpoints import load_servers
from .aggregator import StatusAggregator
from .models import AggregateResult
from .ui import render_page

logging.basicConfig(level=Settings().LOG_LEVEL.upper(), format=LOG_FORMAT)
logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None,
               transport: Optional[httpx.AsyncBaseTransport] = None) -> FastAPI:
    """Build the dashboard app.

    The server list is read once here; an invalid file raises ConfigError
    and the app never starts. ``transport`` is handed to the per-request
    httpx client (tests pass an ``httpx.MockTransport``).
    """
    settings = settings or Settings()
    servers = load_servers(settings.SERVERS_PATH)
    logger.info(f"Configuration loaded successfully. {len(servers)} servers configured.")

    app = FastAPI(title=f"{settings.SITE_TITLE} Online Users")
    app.state.settings = settings
    app.state.servers = servers

    async def poll() -> AggregateResult:
        async with httpx.AsyncClient(transport=transport) as client:
            return await StatusAggregator(client, user_agent=settings.UA).aggregate(servers)

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Poll every server and render the status table"""
        result = await poll()
        return HTMLResponse(render_page(result, settings), headers={
            "Content-Security-Policy": "frame-ancestors *;",
            "Cache-Control": "no-store",
        })

    @app.get("/api/status", response_class=JSONResponse)
    async def api_status():
        result = await poll()
        return JSONResponse(result.to_dict(), headers={"Cache-Control": "no-store"})

    @app.get("/health", response_class=JSONResponse)
    def health():
        return JSONResponse({"ok": True, "ts": time.time(), "servers_count": len(servers)})

    return app


def get_app() -> FastAPI:  # pragma: no cover
    """Factory for ``uvicorn --factory onlineboard.app.main:get_app``."""
    return create_app()


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    settings = Settings()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT, log_level="info")
