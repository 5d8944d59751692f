"""
FastAPI application for server-info.

Runs on localhost only (127.0.0.1): the full report contains database
credentials.
Provides the dashboard widget, the settings page and a JSON API.
"""

from pathlib import Path
from typing import Any

from fastapi import FastAPI, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles

from server_info import __version__
from server_info.context import RequestContext
from server_info.core import ServerInfo
from server_info.render.html import RenderMode
from server_info.web.routes import report as report_route

# Module paths
PACKAGE_DIR = Path(__file__).parent.parent
STATIC_DIR = PACKAGE_DIR / "static"


def create_app(server_info: ServerInfo, server_software: str | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        server_info: Composition root built once at startup.
        server_software: Web server identification shown on the report.
    """
    app = FastAPI(
        title="Server Info",
        description="Hosting environment information for administrators",
        version=__version__,
        docs_url="/api/docs",
        redoc_url=None,
    )
    app.state.server_info = server_info
    app.state.server_software = server_software

    # Mount static files
    if STATIC_DIR.exists():
        app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    app.include_router(report_route.router, prefix="/api", tags=["report"])

    def _collect(request: Request):
        context = RequestContext.from_scope(
            request.scope,
            server_software=server_software,
            server_admin=server_info.server_admin,
        )
        return server_info.collect(context)

    @app.get("/", response_class=HTMLResponse)
    def dashboard(request: Request) -> Any:
        """Dashboard widget with the summary facts."""
        report = _collect(request)
        return server_info.renderer.render_page(report, RenderMode.SUMMARY)

    @app.get("/server-info", response_class=HTMLResponse)
    def settings_page(
        request: Request,
        redact: bool = Query(False, description="Hide sensitive values"),
    ) -> Any:
        """Settings page with the full report."""
        report = _collect(request)
        return server_info.renderer.render_page(report, RenderMode.FULL, redact_sensitive=redact)

    return app


def run_server(server_info: ServerInfo, host: str = "127.0.0.1", port: int = 8765) -> None:
    """Run the FastAPI server with uvicorn.

    Args:
        server_info: Composition root.
        host: Bind address. MUST be 127.0.0.1 for security.
        port: Port to listen on.
    """
    import uvicorn

    # Security: Force localhost binding
    if host != "127.0.0.1":
        print("Security: Forcing bind to 127.0.0.1 (localhost only)")
        host = "127.0.0.1"

    print(f"Starting server-info at http://{host}:{port}/")
    app = create_app(server_info, server_software=f"uvicorn/{uvicorn.__version__}")
    uvicorn.run(app, host=host, port=port, log_level="info")
