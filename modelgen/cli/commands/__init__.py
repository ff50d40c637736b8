"""
Main CLI command registration.

This module sets up the main CLI command group and registers all subcommands.
"""
import logging

import typer

from ...core.config import settings

# Create the main command group
app = typer.Typer(help="modelgen CLI")

from . import model
app.add_typer(model.app, name="model", help="Model description and code generation commands")

from . import server as server_module
app.add_typer(server_module.app, name="server", help="Server management commands")


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
):
    """Generate Sequelize, Mongoose and MySQL code from model descriptions."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


__all__ = ['app']
