"""
Type mapping from abstract field types to MySQL and Mongoose type tokens.
"""
from typing import Dict, List, Optional

from ..schemas import AbstractType, TypeMappingRow

# MySQL column types, also used as the Sequelize column type
RELATIONAL_TYPE_MAPPING: Dict[AbstractType, str] = {
    AbstractType.STRING: "VARCHAR(255)",
    AbstractType.TEXT: "TEXT",
    AbstractType.NUMBER: "INT",
    AbstractType.BIGINT: "BIGINT",
    AbstractType.FLOAT: "FLOAT",
    AbstractType.DECIMAL: "DECIMAL(10,2)",
    AbstractType.BOOLEAN: "TINYINT(1)",
    AbstractType.DATE: "DATE",
    AbstractType.DATETIME: "DATETIME",
    AbstractType.TIMESTAMP: "TIMESTAMP",
    AbstractType.JSON: "JSON",
}
DEFAULT_RELATIONAL_TYPE = "VARCHAR(255)"

# Mongoose SchemaType tokens; "Mixed" is destructured from Schema.Types in the generated code
DOCUMENT_TYPE_MAPPING: Dict[AbstractType, str] = {
    AbstractType.STRING: "String",
    AbstractType.NUMBER: "Number",
    AbstractType.BOOLEAN: "Boolean",
    AbstractType.DATE: "Date",
    AbstractType.ARRAY: "[Mixed]",
    AbstractType.OBJECT: "Mixed",
    AbstractType.BUFFER: "Buffer",
    AbstractType.MAP: "Map",
    AbstractType.JSON: "Mixed",
}
DEFAULT_DOCUMENT_TYPE = "String"


def _as_abstract_type(field_type: str) -> Optional[AbstractType]:
    """Resolve a type name to an AbstractType, or None for blank/unknown names."""
    try:
        return AbstractType(field_type)
    except ValueError:
        return None


def map_relational_type(field_type: str) -> str:
    """Convert an abstract type to a MySQL column type."""
    return RELATIONAL_TYPE_MAPPING.get(_as_abstract_type(field_type), DEFAULT_RELATIONAL_TYPE)


def map_document_type(field_type: str) -> str:
    """Convert an abstract type to a Mongoose schema type."""
    return DOCUMENT_TYPE_MAPPING.get(_as_abstract_type(field_type), DEFAULT_DOCUMENT_TYPE)


def type_mappings() -> List[TypeMappingRow]:
    """One row per abstract type, in declaration order."""
    return [
        TypeMappingRow(
            type=abstract_type.value,
            relational=map_relational_type(abstract_type),
            document=map_document_type(abstract_type),
        )
        for abstract_type in AbstractType
    ]
