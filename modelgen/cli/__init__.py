"""
Command Line Interface for modelgen.

This module provides the main entry point for the modelgen CLI.
It imports and registers all command groups from the commands package.
"""
from .commands import app

__all__ = ['app']
