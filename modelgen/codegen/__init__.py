"""
Code generation from model descriptions.

Every generator is a pure function of the ModelDescription: output is rebuilt
from scratch on each call and nothing is cached between calls.
"""
from typing import Callable, Dict

from ..schemas import ArtifactKind, GeneratedArtifacts, ModelDescription
from .mongoose import generate_mongoose_model
from .mysql import generate_mysql_table
from .sequelize import generate_sequelize_model
from .types import (
    DEFAULT_DOCUMENT_TYPE, DEFAULT_RELATIONAL_TYPE, DOCUMENT_TYPE_MAPPING,
    RELATIONAL_TYPE_MAPPING, map_document_type, map_relational_type, type_mappings,
)


GENERATORS: Dict[ArtifactKind, Callable[[ModelDescription], str]] = {
    ArtifactKind.SEQUELIZE: generate_sequelize_model,
    ArtifactKind.MONGOOSE: generate_mongoose_model,
    ArtifactKind.MYSQL: generate_mysql_table,
}


def artifact_filename(description: ModelDescription, kind: ArtifactKind) -> str:
    """Suggested file name when an artifact is downloaded or written to disk."""
    if kind == ArtifactKind.MYSQL:
        return f"{description.table_name}.sql"
    return f"{description.model_name}.{kind.value}.js"


def generate_artifact(description: ModelDescription, kind: ArtifactKind) -> str:
    """Render a single artifact."""
    return GENERATORS[ArtifactKind(kind)](description)


def generate_artifacts(description: ModelDescription) -> GeneratedArtifacts:
    """Render all three artifacts for a description."""
    return GeneratedArtifacts(
        sequelize=generate_sequelize_model(description),
        mongoose=generate_mongoose_model(description),
        mysql=generate_mysql_table(description),
    )


__all__ = [
    "GENERATORS", "artifact_filename", "generate_artifact", "generate_artifacts",
    "generate_sequelize_model", "generate_mongoose_model", "generate_mysql_table",
    "map_relational_type", "map_document_type", "type_mappings",
    "RELATIONAL_TYPE_MAPPING", "DOCUMENT_TYPE_MAPPING",
    "DEFAULT_RELATIONAL_TYPE", "DEFAULT_DOCUMENT_TYPE",
]
