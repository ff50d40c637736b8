# Allows running the CLI with `python -m modelgen.cli`
from . import app

app()
