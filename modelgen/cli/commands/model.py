"""
Model description and code generation commands.
"""
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from pydantic import ValidationError
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from ...codegen import artifact_filename, generate_artifact, type_mappings
from ...core.config import settings
from ...exceptions import DescriptionLoadError
from ...schemas import ArtifactKind, ModelDescription, ModuleStyle
from ..utils import console, print_error, print_success, print_warning

app = typer.Typer(help="Model description and code generation commands")

LEXERS = {
    ArtifactKind.SEQUELIZE: "javascript",
    ArtifactKind.MONGOOSE: "javascript",
    ArtifactKind.MYSQL: "sql",
}

TITLES = {
    ArtifactKind.SEQUELIZE: "Sequelize Model",
    ArtifactKind.MONGOOSE: "Mongoose Model",
    ArtifactKind.MYSQL: "MySQL CREATE TABLE Query",
}


class Target(str, Enum):
    ALL = "all"
    SEQUELIZE = "sequelize"
    MONGOOSE = "mongoose"
    MYSQL = "mysql"


def _kinds(target: Target) -> List[ArtifactKind]:
    if target == Target.ALL:
        return list(ArtifactKind)
    return [ArtifactKind(target.value)]


def load_description(path: Path) -> ModelDescription:
    """Read a model description from a JSON file.

    Raises:
        DescriptionLoadError: If the file can't be read or isn't a valid description
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise DescriptionLoadError(
            f"Could not read {path}: {e}",
            context={"path": str(path)},
            original_exception=e,
        )
    try:
        return ModelDescription.model_validate_json(raw)
    except ValidationError as e:
        raise DescriptionLoadError(
            f"Invalid model description in {path}: {e}",
            context={"path": str(path)},
            original_exception=e,
        )


@app.command("new")
def new_description(
    path: Path,
    model_name: str = typer.Option("", "--model-name", "-m", help="Model name"),
    table_name: str = typer.Option("", "--table-name", "-t", help="Table/collection name"),
    module_style: ModuleStyle = typer.Option(
        ModuleStyle(settings.DEFAULT_MODULE_STYLE), "--module-style", help="JavaScript module syntax"
    ),
    timestamps: bool = typer.Option(settings.DEFAULT_USE_TIMESTAMPS, "--timestamps/--no-timestamps"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a starter model description with one blank field."""
    if path.exists() and not force:
        print_error(f"File '{path}' already exists! Use --force to overwrite it.")
        raise typer.Exit(1)

    description = ModelDescription(
        model_name=model_name,
        table_name=table_name,
        use_timestamps=timestamps,
        module_style=module_style,
    ).add_field()

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(description.model_dump_json(by_alias=True, indent=2) + "\n", encoding="utf-8")
    print_success(f"Created model description '{path}'")


@app.command("generate")
def generate(
    path: Path,
    target: Target = typer.Option(Target.ALL, "--target", help="Artifact to generate"),
    output_dir: Optional[Path] = typer.Option(None, "--output-dir", "-o", help="Write files here instead of printing"),
    plain: bool = typer.Option(False, "--plain", help="Print raw code without formatting"),
) -> None:
    """Generate code from a model description file."""
    try:
        description = load_description(path)
    except DescriptionLoadError as e:
        print_error(str(e))
        raise typer.Exit(1)

    for index in description.untyped_fields():
        name = description.fields[index].name
        print_warning(f"Field #{index + 1} ({name!r}) has no type; the default type will be used")

    kinds = _kinds(target)
    if output_dir is not None:
        output_dir.mkdir(parents=True, exist_ok=True)
        for kind in kinds:
            destination = output_dir / artifact_filename(description, kind)
            destination.write_text(generate_artifact(description, kind) + "\n", encoding="utf-8")
            print_success(f"Wrote {destination}")
        return

    if plain:
        typer.echo("\n\n".join(generate_artifact(description, kind) for kind in kinds))
        return

    for kind in kinds:
        code = Syntax(generate_artifact(description, kind), LEXERS[kind], theme="monokai", word_wrap=True)
        console.print(Panel(code, title=TITLES[kind], expand=False))


@app.command("types")
def list_types() -> None:
    """Show how each field type is rendered."""
    table = Table(title="Field types")
    table.add_column("Type", style="cyan")
    table.add_column("MySQL / Sequelize")
    table.add_column("Mongoose")
    for row in type_mappings():
        table.add_row(row.type, row.relational, row.document)
    console.print(table)
