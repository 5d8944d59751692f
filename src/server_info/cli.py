"""
Click-based CLI for server-info.

This module only ORCHESTRATES: it loads configuration, builds the
composition root and hands reports to a renderer.
"""

import logging
import os
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from server_info import __version__
from server_info.config import ConfigError, ConfigManager
from server_info.context import RequestContext
from server_info.core import ServerInfo
from server_info.render.console import ConsoleRenderer
from server_info.render.html import RenderMode

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="server-info")
@click.option("--config", "-c", type=click.Path(dir_okay=False), help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Log probe failures")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """server-info: hosting environment information.

    Shows OS, web server, Python runtime, database and application details.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )

    ctx.ensure_object(dict)
    config_path = Path(config) if config else None
    try:
        settings = ConfigManager(config_path).load()
        server_info = ServerInfo.from_settings(settings)
    except ConfigError as e:
        console.print(f"[red]Configuration error:[/] {escape(str(e))}", highlight=False)
        sys.exit(1)

    ctx.obj["settings"] = settings
    ctx.obj["server_info"] = server_info


def _collect(ctx: click.Context):
    server_info: ServerInfo = ctx.obj["server_info"]
    return server_info.collect(RequestContext.from_environ(os.environ))


@main.command()
@click.option("--mode", type=click.Choice([m.value for m in RenderMode]), default=RenderMode.FULL.value)
@click.option("--redact", is_flag=True, help="Hide sensitive values")
@click.pass_context
def show(ctx: click.Context, mode: str, redact: bool) -> None:
    """Print the report to the terminal."""
    report = _collect(ctx)
    ConsoleRenderer(console, redact_sensitive=redact).render(report, mode)


@main.command()
@click.option("--mode", type=click.Choice([m.value for m in RenderMode]), default=RenderMode.FULL.value)
@click.option("--redact", is_flag=True, help="Hide sensitive values")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write to file instead of stdout")
@click.option("--page", is_flag=True, help="Wrap in a standalone HTML document")
@click.pass_context
def html(ctx: click.Context, mode: str, redact: bool, output: str | None, page: bool) -> None:
    """Render the report as HTML."""
    server_info: ServerInfo = ctx.obj["server_info"]
    report = _collect(ctx)
    if page:
        content = server_info.renderer.render_page(report, mode, redact_sensitive=redact)
    else:
        content = server_info.render(report, mode, redact_sensitive=redact)

    if output is None:
        click.echo(content)
        return

    out_path = Path(output).expanduser()
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(content, encoding="utf-8")
    console.print(f"Report written to [bold]{escape(str(out_path.resolve()))}[/]")


@main.command()
@click.option("--host", default=None, help="Bind address (forced to 127.0.0.1)")
@click.option("--port", "-p", type=int, default=None, help="Port to listen on")
@click.pass_context
def web(ctx: click.Context, host: str | None, port: int | None) -> None:
    """Serve the dashboard widget and settings page."""
    from server_info.web.app import run_server

    settings = ctx.obj["settings"]
    run_server(
        ctx.obj["server_info"],
        host=host or settings.host,
        port=port or settings.port,
    )


if __name__ == "__main__":
    main()
