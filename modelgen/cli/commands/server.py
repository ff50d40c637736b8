"""
Server management commands.

This module is loaded on-demand when server-related commands are invoked.
"""
from typing import Optional

import typer

from ..utils import print_info, print_success

# Create the command group
app = typer.Typer(help="Server management commands")


@app.command("run")
def run_server(
    host: Optional[str] = typer.Option(None, help="Bind address (defaults to settings.HOST)"),
    port: Optional[int] = typer.Option(None, help="Port (defaults to settings.PORT)"),
    reload: bool = False,
) -> None:
    """Run the code generation API server."""
    # Import uvicorn only when needed
    import uvicorn
    from ...core.config import settings

    host = host or settings.HOST
    port = port or settings.PORT
    print_success(f"Starting modelgen server at http://{host}:{port}")
    uvicorn.run(
        "modelgen.main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.LOG_LEVEL.lower(),
    )


@app.command("status")
def server_status() -> None:
    """Show server settings."""
    from ...core.config import settings

    print_info("Server settings:")
    print_info(f"  Address: http://{settings.HOST}:{settings.PORT}")
    print_info(f"  API prefix: {settings.API_PREFIX}")
    print_info(f"  Debug mode: {settings.DEBUG}")
    print_info(f"  Docs: http://{settings.HOST}:{settings.PORT}/docs" if settings.DOCS_ENABLED else "  Docs: Disabled")
