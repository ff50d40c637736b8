"""
Code generation endpoints.
"""
from typing import List
from urllib.parse import quote
import logging

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import PlainTextResponse

from ..codegen import artifact_filename, generate_artifact, generate_artifacts, type_mappings
from ..schemas import ArtifactKind, GeneratedArtifacts, ModelDescription, TypeMappingRow

logger = logging.getLogger(__name__)


def content_disposition(filename: str) -> str:
    """Attachment header for a user-derived file name, encoded like Starlette's FileResponse."""
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


router = APIRouter(
    tags=["codegen"],
    responses={404: {"description": "Not found"}},
)


@router.get(
    "/types",
    response_model=List[TypeMappingRow],
    summary="List supported field types",
)
async def list_types() -> List[TypeMappingRow]:
    """Every abstract field type with its MySQL and Mongoose rendering."""
    return type_mappings()


@router.post(
    "/generate",
    response_model=GeneratedArtifacts,
    summary="Generate Sequelize, Mongoose and MySQL code for a model",
)
async def generate(description: ModelDescription) -> GeneratedArtifacts:
    """
    Generate all artifacts for a model description.

    - **modelName**: name of the generated model
    - **tableName**: table (or collection) name
    - **useTimestamps**: add createdAt/updatedAt
    - **moduleStyle**: `esm` or `commonjs`
    - **fields**: ordered list of fields
    """
    logger.info(f"Generating artifacts for model {description.model_name!r} ({len(description.fields)} fields)")
    try:
        return generate_artifacts(description)
    except Exception as e:
        logger.error(f"Failed to generate artifacts for {description.model_name!r}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate code: {str(e)}"
        )


@router.post(
    "/generate/{kind}",
    response_class=PlainTextResponse,
    summary="Generate a single artifact as a downloadable file",
    responses={
        200: {
            "content": {"text/plain": {"example": "CREATE TABLE `users` (\n  `age` INT NOT NULL\n);"}},
            "description": "The generated source",
        }
    }
)
async def generate_one(kind: ArtifactKind, description: ModelDescription):
    """Generate one artifact; the response can be saved directly to a file."""
    logger.info(f"Generating {kind.value} artifact for model {description.model_name!r}")
    try:
        content = generate_artifact(description, kind)
    except Exception as e:
        logger.error(f"Failed to generate {kind.value} for {description.model_name!r}: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to generate {kind.value} code: {str(e)}"
        )
    return PlainTextResponse(
        content=content,
        media_type="text/plain",
        headers={"Content-Disposition": content_disposition(artifact_filename(description, kind))}
    )
