"""
ASGI entry point: ``uvicorn modelgen.main:app``.
"""
from . import create_app

app = create_app()
