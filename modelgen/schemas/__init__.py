"""
Pydantic schemas for model descriptions and generated artifacts.
"""
from .model import AbstractType, ModuleStyle, FieldSpec, ModelDescription
from .artifacts import ArtifactKind, GeneratedArtifacts, TypeMappingRow

__all__ = [
    "AbstractType", "ModuleStyle", "FieldSpec", "ModelDescription",
    "ArtifactKind", "GeneratedArtifacts", "TypeMappingRow",
]
