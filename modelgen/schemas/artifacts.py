"""
Pydantic models for generated output.
"""
from enum import Enum

from pydantic import BaseModel


class ArtifactKind(str, Enum):
    """The artifacts that can be generated from a model description."""
    SEQUELIZE = "sequelize"
    MONGOOSE = "mongoose"
    MYSQL = "mysql"


class GeneratedArtifacts(BaseModel):
    """All three artifacts rendered from one description."""
    sequelize: str
    mongoose: str
    mysql: str

    class Config:
        frozen = True


class TypeMappingRow(BaseModel):
    """How one abstract type is rendered in each target syntax."""
    type: str
    relational: str
    document: str
